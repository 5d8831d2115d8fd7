from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.io import IOResult
from returns.result import Failure

from artflow_client.core.domain.model.catalog import Artwork
from artflow_client.core.domain.model.errors import StorefrontError
from artflow_client.core.domain.service.validation import validate_inquiry_details
from artflow_client.core.ports.inbound.inquire import InquireUseCase, InquiryReceipt
from artflow_client.core.ports.outbound.input import InputCollector
from artflow_client.core.ports.outbound.notifications import InquirySent, Notifier
from artflow_client.core.ports.outbound.storefront_gateway import (
    InquiryRequest,
    StorefrontGateway,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InquiryDeps:
    gateway: StorefrontGateway
    input: InputCollector
    notifier: Notifier


@dataclass(frozen=True)
class InquiryService(InquireUseCase):
    deps: InquiryDeps

    async def inquire(self, artwork: Artwork) -> IOResult[InquiryReceipt, StorefrontError]:
        details = await self.deps.input.collect_inquiry_details(artwork)
        validated = validate_inquiry_details(details)
        if isinstance(validated, Failure):
            logger.info("inquiry aborted: %s", validated.failure())
            return IOResult.from_result(validated)

        d = validated.unwrap()
        request = InquiryRequest(
            artwork_id=artwork.id,
            buyer_name=d.buyer_name,
            buyer_email=d.buyer_email,
            message=d.message,
        )
        sent = await self.deps.gateway.submit_inquiry(request)
        return sent.map(lambda status: self._confirm(artwork, status))

    def _confirm(self, artwork: Artwork, status_code: int) -> InquiryReceipt:
        self.deps.notifier.notify(
            InquirySent(artwork_id=artwork.id, artwork_title=artwork.title)
        )
        return InquiryReceipt(artwork_id=artwork.id, status_code=status_code)
