from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable

from artflow_client.core.domain.model.catalog import Artwork
from artflow_client.core.ports.outbound.input import (
    CheckoutDetails,
    InputCollector,
    InquiryDetails,
)


@dataclass
class ConsoleInputCollector(InputCollector):
    """Prompts on the terminal. End of input (Ctrl-D) cancels the whole form."""

    read: Callable[[str], str] = input

    async def collect_checkout_details(self) -> CheckoutDetails | None:
        answers = await self._ask("Your name", "Email", "Shipping address")
        if answers is None:
            return None
        name, email, address = answers
        return CheckoutDetails(buyer_name=name, buyer_email=email, shipping_address=address)

    async def collect_inquiry_details(self, artwork: Artwork) -> InquiryDetails | None:
        answers = await self._ask(
            f'Your name to inquire about "{artwork.title}"',
            "Your email",
            "Message to the artist",
        )
        if answers is None:
            return None
        name, email, message = answers
        return InquiryDetails(buyer_name=name, buyer_email=email, message=message)

    async def _ask(self, *prompts: str) -> list[str] | None:
        answers = []
        for prompt in prompts:
            try:
                answers.append(await asyncio.to_thread(self.read, f"{prompt}: "))
            except EOFError:
                return None
        return answers
