from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Sequence, Tuple

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import Artwork, ItemId, Post, Supply
from artflow_client.core.domain.model.errors import StorefrontError


@dataclass(frozen=True)
class InquiryRequest:
    artwork_id: ItemId
    buyer_name: str
    buyer_email: str
    message: str


@dataclass(frozen=True)
class OrderLineRequest:
    item_id: ItemId
    quantity: int
    price: Decimal | None


@dataclass(frozen=True)
class OrderRequest:
    buyer_name: str
    buyer_email: str
    shipping_address: str
    items: Sequence[OrderLineRequest]


@dataclass(frozen=True)
class OrderResponse:
    status_code: int
    subtotal: str | None  # backend text, unparsed

    @property
    def accepted(self) -> bool:
        return 200 <= self.status_code < 300


class StorefrontGateway(Protocol):
    """
    Stateless request/response calls against the storefront backend.
    No retry and no caching: every call is exactly one HTTP round trip.
    """

    async def fetch_artworks(self) -> IOResult[Tuple[Artwork, ...], StorefrontError]: ...

    async def fetch_supplies(self) -> IOResult[Tuple[Supply, ...], StorefrontError]: ...

    async def fetch_posts(self) -> IOResult[Tuple[Post, ...], StorefrontError]: ...

    async def submit_inquiry(
        self, request: InquiryRequest
    ) -> IOResult[int, StorefrontError]:
        """Success carries the HTTP status, which callers do not inspect."""
        ...

    async def submit_order(
        self, request: OrderRequest
    ) -> IOResult[OrderResponse, StorefrontError]: ...

    async def like_post(self, post_id: ItemId) -> IOResult[int, StorefrontError]: ...
