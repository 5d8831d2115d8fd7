from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from returns.io import IOResult, IOSuccess

from artflow_client.core.domain.model.catalog import Artwork, ItemId, Post, Supply
from artflow_client.core.domain.model.errors import StorefrontError
from artflow_client.core.ports.outbound.input import CheckoutDetails, InquiryDetails
from artflow_client.core.ports.outbound.notifications import Notice
from artflow_client.core.ports.outbound.storefront_gateway import (
    InquiryRequest,
    OrderRequest,
    OrderResponse,
)


def supply(id: str, price: str = "10", **kw: Any) -> Supply:
    return Supply(id=id, title=kw.pop("title", f"Supply {id}"), price=Decimal(price), currency="USD", **kw)


def artwork(id: str, **kw: Any) -> Artwork:
    return Artwork(id=id, title=kw.pop("title", f"Artwork {id}"), **kw)


def post(id: str, likes: int = 0, **kw: Any) -> Post:
    return Post(id=id, author_name="ana", content=f"post {id}", likes=likes, **kw)


@dataclass
class FakeGateway:
    artworks: IOResult[Tuple[Artwork, ...], StorefrontError] = field(
        default_factory=lambda: IOSuccess(())
    )
    supplies: IOResult[Tuple[Supply, ...], StorefrontError] = field(
        default_factory=lambda: IOSuccess(())
    )
    posts: IOResult[Tuple[Post, ...], StorefrontError] = field(
        default_factory=lambda: IOSuccess(())
    )
    order_response: IOResult[OrderResponse, StorefrontError] = field(
        default_factory=lambda: IOSuccess(OrderResponse(status_code=201, subtotal="25"))
    )
    inquiry_response: IOResult[int, StorefrontError] = field(
        default_factory=lambda: IOSuccess(201)
    )
    like_response: IOResult[int, StorefrontError] = field(
        default_factory=lambda: IOSuccess(200)
    )
    # set to hold mutating calls until released
    gate: asyncio.Event | None = None
    # path -> event holding that collection fetch until released
    fetch_gates: Dict[str, asyncio.Event] = field(default_factory=dict)
    calls: List[Tuple[str, Any]] = field(default_factory=list)

    async def fetch_artworks(self):
        self.calls.append(("GET", "/artworks"))
        await self._hold("/artworks")
        return self.artworks

    async def fetch_supplies(self):
        self.calls.append(("GET", "/supplies"))
        await self._hold("/supplies")
        return self.supplies

    async def fetch_posts(self):
        self.calls.append(("GET", "/posts"))
        await self._hold("/posts")
        return self.posts

    async def submit_inquiry(self, request: InquiryRequest):
        self.calls.append(("POST /inquiries", request))
        await self._wait()
        return self.inquiry_response

    async def submit_order(self, request: OrderRequest):
        self.calls.append(("POST /orders", request))
        await self._wait()
        return self.order_response

    async def like_post(self, post_id: ItemId):
        self.calls.append(("POST /posts/like", post_id))
        await self._wait()
        return self.like_response

    def posted(self) -> list[Tuple[str, Any]]:
        return [c for c in self.calls if c[0].startswith("POST")]

    async def _hold(self, path: str) -> None:
        gate = self.fetch_gates.get(path)
        if gate is not None:
            await gate.wait()

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()


@dataclass
class ScriptedInput:
    checkout: CheckoutDetails | None = None
    inquiry: InquiryDetails | None = None
    asked: List[str] = field(default_factory=list)

    async def collect_checkout_details(self) -> CheckoutDetails | None:
        self.asked.append("checkout")
        return self.checkout

    async def collect_inquiry_details(self, artwork: Artwork) -> InquiryDetails | None:
        self.asked.append(f"inquiry:{artwork.id}")
        return self.inquiry


@dataclass
class RecordingNotifier:
    notices: List[Notice] = field(default_factory=list)

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)
