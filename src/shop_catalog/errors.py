"""Exception taxonomy for the shop catalog."""


class ShopCatalogError(Exception):
    """Base exception for catalog operations."""


class NotFoundError(ShopCatalogError):
    """A catalog or identity record does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class AssetUploadError(ShopCatalogError):
    """The remote asset store rejected or failed an upload."""

    def __init__(self, message: str, payload: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.payload = payload or {"error": {"message": message}}


class AuthenticationError(ShopCatalogError):
    """Credentials did not match a stored user."""


class RegistrationError(ShopCatalogError):
    """A new user could not be registered."""


class LoginRequired(ShopCatalogError):
    """Raised by the auth guard when the request carries no session user."""


class PersistenceError(ShopCatalogError):
    """The persistence collaborator failed to apply a mutation."""
