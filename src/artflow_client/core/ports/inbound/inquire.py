from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import Artwork, ItemId
from artflow_client.core.domain.model.errors import StorefrontError


@dataclass(frozen=True)
class InquiryReceipt:
    artwork_id: ItemId
    status_code: int


class InquireUseCase(Protocol):
    async def inquire(self, artwork: Artwork) -> IOResult[InquiryReceipt, StorefrontError]: ...
