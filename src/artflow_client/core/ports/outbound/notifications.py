from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from artflow_client.core.domain.model.catalog import ItemId


@dataclass(frozen=True)
class CartIsEmpty:
    pass


@dataclass(frozen=True)
class OrderPlaced:
    subtotal: str | None


@dataclass(frozen=True)
class InquirySent:
    artwork_id: ItemId
    artwork_title: str


Notice = Union[CartIsEmpty, OrderPlaced, InquirySent]


class Notifier(Protocol):
    def notify(self, notice: Notice) -> None: ...
