"""Validated request bodies for the mutating routes."""

from fastapi import Form
from pydantic import BaseModel


class AddItemForm(BaseModel):
    """Fields submitted with the add-item form (besides the image)."""

    title: str = ""
    body: str = ""
    category: str | None = None
    published: bool = False


class AddCategoryForm(BaseModel):
    """Fields submitted with the add-category form."""

    category: str = ""


class LoginForm(BaseModel):
    """Credentials submitted with the login form."""

    user_name: str
    password: str


class RegisterForm(BaseModel):
    """Fields submitted with the registration form."""

    user_name: str
    email: str
    password: str
    password2: str


async def add_item_form(
    title: str = Form(""),
    body: str = Form(""),
    category: str | None = Form(None),
    published: bool = Form(False),
) -> AddItemForm:
    return AddItemForm(title=title, body=body, category=category, published=published)


async def add_category_form(category: str = Form("")) -> AddCategoryForm:
    return AddCategoryForm(category=category)


async def login_form(
    user_name: str = Form(..., alias="userName"),
    password: str = Form(...),
) -> LoginForm:
    return LoginForm(user_name=user_name, password=password)


async def register_form(
    user_name: str = Form(..., alias="userName"),
    email: str = Form(...),
    password: str = Form(...),
    password2: str = Form(...),
) -> RegisterForm:
    return RegisterForm(
        user_name=user_name, email=email, password=password, password2=password2
    )
