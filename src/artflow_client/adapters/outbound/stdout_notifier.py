from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from artflow_client.core.ports.outbound.notifications import (
    CartIsEmpty,
    InquirySent,
    Notice,
    Notifier,
    OrderPlaced,
)


def render_notice(notice: Notice) -> str:
    if isinstance(notice, CartIsEmpty):
        return "Cart is empty"
    if isinstance(notice, OrderPlaced):
        return f"Order placed! Subtotal: {notice.subtotal}"
    if isinstance(notice, InquirySent):
        return "Inquiry sent! The artist will reach out to you."
    raise TypeError(f"unknown notice: {notice!r}")


@dataclass
class StdoutNotifier(Notifier):
    write: Callable[[str], None] = print

    def notify(self, notice: Notice) -> None:
        self.write(f"[notice] {render_notice(notice)}")
