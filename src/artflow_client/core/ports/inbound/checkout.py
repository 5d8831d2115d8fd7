from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from returns.io import IOResult

from artflow_client.core.domain.model.errors import StorefrontError


@dataclass(frozen=True)
class OrderConfirmation:
    subtotal: str | None  # as reported by the backend, never computed locally
    status_code: int
    line_count: int


class CheckoutUseCase(Protocol):
    async def checkout(self) -> IOResult[OrderConfirmation, StorefrontError]: ...
