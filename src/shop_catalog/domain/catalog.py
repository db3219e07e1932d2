"""Domain models for catalog items and categories."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Category:
    """A navigation category referenced by catalog items."""

    id: int
    name: str


@dataclass(frozen=True)
class NewCatalogItem:
    """A catalog item that has not been persisted yet."""

    title: str
    body: str
    post_date: date
    category: str | None
    feature_image: str
    published: bool


@dataclass(frozen=True)
class CatalogItem:
    """Represents a persisted catalog entry."""

    id: int
    title: str
    body: str
    post_date: date
    category: str | None
    feature_image: str
    published: bool

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape used by the raw item lookup."""
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "postDate": self.post_date.isoformat(),
            "category": self.category,
            "featureImage": self.feature_image,
            "published": self.published,
        }


@dataclass(frozen=True)
class UploadResult:
    """Reference to an image stored in the remote asset store."""

    url: str
    public_id: str
