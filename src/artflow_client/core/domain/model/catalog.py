from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple, Union

# kept as the backend sent it (string or number) so it can be echoed back verbatim
ItemId = Union[str, int]


@dataclass(frozen=True)
class Artwork:
    """Showcase piece. Carries a guide price only; never added to a cart."""

    id: ItemId
    title: str
    images: Tuple[str, ...] = ()
    medium: str | None = None
    year: int | str | None = None
    price: Decimal | None = None
    currency: str | None = None

    @property
    def cover_image(self) -> str | None:
        return self.images[0] if self.images else None


@dataclass(frozen=True)
class Supply:
    id: ItemId
    title: str
    price: Decimal | None = None
    currency: str | None = None
    image_url: str | None = None
    category: str | None = None
    brand: str | None = None


CatalogItem = Union[Artwork, Supply]


@dataclass(frozen=True)
class Post:
    id: ItemId
    author_name: str
    content: str
    tags: Tuple[str, ...] = ()
    image_url: str | None = None
    likes: int = 0


@dataclass(frozen=True)
class Catalog:
    artworks: Tuple[Artwork, ...]
    supplies: Tuple[Supply, ...]
    posts: Tuple[Post, ...]
