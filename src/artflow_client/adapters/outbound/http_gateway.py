from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Tuple, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from returns.io import IOFailure, IOResult, IOSuccess

from artflow_client.core.domain.model.catalog import Artwork, ItemId, Post, Supply
from artflow_client.core.domain.model.errors import (
    MalformedResponse,
    RemoteUnavailable,
    StorefrontError,
)
from artflow_client.core.ports.outbound.storefront_gateway import (
    InquiryRequest,
    OrderRequest,
    OrderResponse,
    StorefrontGateway,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ---- HTTP DTOs -------------------------------------------------------------


class _Incoming(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ArtworkIn(_Incoming):
    id: str | int
    title: str | None = None
    images: list[str | None] | None = None
    medium: str | None = None
    year: int | str | None = None
    price: int | float | None = None
    currency: str | None = None


class SupplyIn(_Incoming):
    id: str | int
    title: str | None = None
    price: int | float | None = None
    currency: str | None = None
    image_url: str | None = None
    category: str | None = None
    brand: str | None = None


class PostIn(_Incoming):
    id: str | int
    author_name: str | None = None
    content: str | None = None
    tags: list[str | None] | None = None
    image_url: str | None = None
    likes: int | None = None


class OrderIn(_Incoming):
    subtotal: Any = None


class InquiryBody(BaseModel):
    artwork_id: str | int
    buyer_name: str
    buyer_email: str
    message: str


class OrderLineBody(BaseModel):
    item_id: str | int
    quantity: int = Field(gt=0)
    price: int | float | None


class OrderBody(BaseModel):
    buyer_name: str
    buyer_email: str
    shipping_address: str
    items: list[OrderLineBody]


class LikeBody(BaseModel):
    post_id: str | int


# ---- Mapping helpers -------------------------------------------------------


def _to_decimal(value: int | float | None) -> Decimal | None:
    return None if value is None else Decimal(str(value))


def _text(value: str | None) -> str:
    return value or ""


def _present(values: list[str | None] | None) -> Tuple[str, ...]:
    return tuple(v for v in values or () if v is not None)


def _subtotal_text(value: Any) -> str | None:
    # shown verbatim; "25.00" from a Decimal-serializing backend stays "25.00"
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_number(value: Decimal | None) -> int | float | None:
    if value is None:
        return None
    return int(value) if value == value.to_integral_value() else float(value)


def _to_artwork(raw: Any) -> Artwork:
    a = ArtworkIn.model_validate(raw)
    return Artwork(
        id=a.id,
        title=_text(a.title),
        images=_present(a.images),
        medium=a.medium,
        year=a.year,
        price=_to_decimal(a.price),
        currency=a.currency,
    )


def _to_supply(raw: Any) -> Supply:
    s = SupplyIn.model_validate(raw)
    return Supply(
        id=s.id,
        title=_text(s.title),
        price=_to_decimal(s.price),
        currency=s.currency,
        image_url=s.image_url,
        category=s.category,
        brand=s.brand,
    )


def _to_post(raw: Any) -> Post:
    p = PostIn.model_validate(raw)
    return Post(
        id=p.id,
        author_name=_text(p.author_name),
        content=_text(p.content),
        tags=_present(p.tags),
        image_url=p.image_url,
        likes=p.likes or 0,
    )


def _items(payload: Any) -> list[Any]:
    # a body without an `items` container counts as an empty collection
    if isinstance(payload, dict):
        return payload.get("items") or []
    return []


def _order_body(request: OrderRequest) -> dict[str, Any]:
    return OrderBody(
        buyer_name=request.buyer_name,
        buyer_email=request.buyer_email,
        shipping_address=request.shipping_address,
        items=[
            OrderLineBody(
                item_id=ln.item_id,
                quantity=ln.quantity,
                price=_to_number(ln.price),
            )
            for ln in request.items
        ],
    ).model_dump()


# ---- Gateway ---------------------------------------------------------------


def build_http_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, timeout=timeout)


@dataclass(frozen=True)
class HttpStorefrontGateway(StorefrontGateway):
    client: httpx.AsyncClient

    async def fetch_artworks(self) -> IOResult[Tuple[Artwork, ...], StorefrontError]:
        return await self._fetch_collection("/artworks", _to_artwork)

    async def fetch_supplies(self) -> IOResult[Tuple[Supply, ...], StorefrontError]:
        return await self._fetch_collection("/supplies", _to_supply)

    async def fetch_posts(self) -> IOResult[Tuple[Post, ...], StorefrontError]:
        return await self._fetch_collection("/posts", _to_post)

    async def submit_inquiry(
        self, request: InquiryRequest
    ) -> IOResult[int, StorefrontError]:
        body = InquiryBody(
            artwork_id=request.artwork_id,
            buyer_name=request.buyer_name,
            buyer_email=request.buyer_email,
            message=request.message,
        ).model_dump()
        return (await self._post("/inquiries", body)).map(lambda r: r.status_code)

    async def submit_order(
        self, request: OrderRequest
    ) -> IOResult[OrderResponse, StorefrontError]:
        sent = await self._post("/orders", _order_body(request))
        return sent.bind(_to_order_response)

    async def like_post(self, post_id: ItemId) -> IOResult[int, StorefrontError]:
        body = LikeBody(post_id=post_id).model_dump()
        return (await self._post("/posts/like", body)).map(lambda r: r.status_code)

    async def _fetch_collection(
        self, path: str, convert: Callable[[Any], T]
    ) -> IOResult[Tuple[T, ...], StorefrontError]:
        try:
            response = await self.client.get(path)
        except httpx.RequestError as e:
            logger.error("storefront backend unavailable: GET %s: %s", path, e)
            return IOFailure(RemoteUnavailable(message=str(e), path=path))
        return _decode_json(response, path).bind(
            lambda payload: _convert_all(path, payload, convert)
        )

    async def _post(
        self, path: str, body: dict[str, Any]
    ) -> IOResult[httpx.Response, StorefrontError]:
        try:
            response = await self.client.post(
                path, json=body, headers={"Content-Type": "application/json"}
            )
        except httpx.RequestError as e:
            logger.error("storefront backend unavailable: POST %s: %s", path, e)
            return IOFailure(RemoteUnavailable(message=str(e), path=path))
        logger.debug("POST %s -> %d", path, response.status_code)
        return IOSuccess(response)


def _decode_json(response: httpx.Response, path: str) -> IOResult[Any, StorefrontError]:
    try:
        return IOSuccess(response.json())
    except ValueError as e:
        return IOFailure(
            MalformedResponse(message=f"body is not JSON: {e}", path=path)
        )


def _convert_all(
    path: str, payload: Any, convert: Callable[[Any], T]
) -> IOResult[Tuple[T, ...], StorefrontError]:
    try:
        return IOSuccess(tuple(convert(raw) for raw in _items(payload)))
    except PydanticValidationError as e:
        return IOFailure(
            MalformedResponse(message=f"{e.error_count()} invalid item field(s)", path=path)
        )


def _to_order_response(response: httpx.Response) -> IOResult[OrderResponse, StorefrontError]:
    def convert(payload: Any) -> IOResult[OrderResponse, StorefrontError]:
        order = OrderIn.model_validate(payload if isinstance(payload, dict) else {})
        return IOSuccess(
            OrderResponse(
                status_code=response.status_code, subtotal=_subtotal_text(order.subtotal)
            )
        )

    return _decode_json(response, "/orders").bind(convert)
