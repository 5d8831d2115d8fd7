from __future__ import annotations

from dataclasses import replace

from returns.result import Failure, Result, Success

from artflow_client.core.domain.model.errors import (
    InputCancelled,
    MissingInput,
    StorefrontError,
)
from artflow_client.core.ports.outbound.input import CheckoutDetails, InquiryDetails

DEFAULT_INQUIRY_MESSAGE = "Interested in this piece."


def _require(value: str, field: str) -> Result[str, StorefrontError]:
    if not value.strip():
        return Failure(MissingInput(message=f"{field} is required", field=field))
    return Success(value)


def validate_checkout_details(
    details: CheckoutDetails | None,
) -> Result[CheckoutDetails, StorefrontError]:
    if details is None:
        return Failure(InputCancelled("checkout cancelled"))
    return (
        _require(details.buyer_name, "buyer_name")
        .bind(lambda _: _require(details.buyer_email, "buyer_email"))
        .bind(lambda _: _require(details.shipping_address, "shipping_address"))
        .map(lambda _: details)
    )


def validate_inquiry_details(
    details: InquiryDetails | None,
) -> Result[InquiryDetails, StorefrontError]:
    if details is None:
        return Failure(InputCancelled("inquiry cancelled"))
    return (
        _require(details.buyer_name, "buyer_name")
        .bind(lambda _: _require(details.buyer_email, "buyer_email"))
        .map(lambda _: _with_default_message(details))
    )


def _with_default_message(details: InquiryDetails) -> InquiryDetails:
    if details.message.strip():
        return details
    return replace(details, message=DEFAULT_INQUIRY_MESSAGE)
