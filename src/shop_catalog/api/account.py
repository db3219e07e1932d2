"""Login, registration and session routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from shop_catalog.api.dependencies import current_session, require_login
from shop_catalog.api.forms import LoginForm, RegisterForm, login_form, register_form
from shop_catalog.api.templating import render
from shop_catalog.domain.sessions import SessionUser
from shop_catalog.errors import AuthenticationError, RegistrationError

if TYPE_CHECKING:
    from shop_catalog.containers import AppContainer

router = APIRouter(tags=["account"])


@router.get("/login")
async def login_page(request: Request) -> Response:
    return render(request, "login.html")


@router.get("/register")
async def register_page(request: Request) -> Response:
    return render(request, "register.html")


@router.post("/login")
async def login(
    request: Request,
    form: LoginForm = Depends(login_form),
) -> Response:
    """Check credentials and start a session."""
    container: AppContainer = request.app.state.container
    try:
        user = await container.auth_service.check_user(
            form.user_name, form.password, request.headers.get("user-agent", "")
        )
    except AuthenticationError as exc:
        return render(
            request,
            "login.html",
            {"error_message": str(exc), "user_name": form.user_name},
        )
    request.state.session = container.session_manager.start(
        SessionUser(
            user_name=user.user_name,
            email=user.email,
            login_history=user.login_history,
        )
    )
    return RedirectResponse("/items", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/register")
async def register(
    request: Request,
    form: RegisterForm = Depends(register_form),
) -> Response:
    container: AppContainer = request.app.state.container
    try:
        await container.auth_service.register_user(
            form.user_name, form.email, form.password, form.password2
        )
    except RegistrationError as exc:
        return render(
            request,
            "register.html",
            {"error_message": str(exc), "user_name": form.user_name},
        )
    return render(request, "register.html", {"success_message": "User created"})


@router.get("/logout")
async def logout(request: Request) -> RedirectResponse:
    """Invalidate the session immediately."""
    session = current_session(request)
    if session is not None:
        session.reset()
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/userHistory", dependencies=[Depends(require_login)])
async def user_history(request: Request) -> Response:
    return render(request, "user_history.html")
