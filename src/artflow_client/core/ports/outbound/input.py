from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from artflow_client.core.domain.model.catalog import Artwork


@dataclass(frozen=True)
class CheckoutDetails:
    buyer_name: str
    buyer_email: str
    shipping_address: str


@dataclass(frozen=True)
class InquiryDetails:
    buyer_name: str
    buyer_email: str
    message: str = ""


class InputCollector(Protocol):
    """Asks the visitor for buyer details. ``None`` means the visitor cancelled."""

    async def collect_checkout_details(self) -> CheckoutDetails | None: ...

    async def collect_inquiry_details(self, artwork: Artwork) -> InquiryDetails | None: ...
