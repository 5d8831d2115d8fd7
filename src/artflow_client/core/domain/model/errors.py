from __future__ import annotations

from dataclasses import dataclass

from artflow_client.core.domain.model.catalog import ItemId


@dataclass(frozen=True)
class StorefrontError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---- local validation (no network call was made) ---------------------------


@dataclass(frozen=True)
class ValidationError(StorefrontError):
    pass


@dataclass(frozen=True)
class EmptyCart(ValidationError):
    pass


@dataclass(frozen=True)
class InputCancelled(ValidationError):
    pass


@dataclass(frozen=True)
class MissingInput(ValidationError):
    field: str

    def __str__(self) -> str:  # pragma: no cover
        return f"missing_input: {self.field} ({self.message})"


@dataclass(frozen=True)
class NotPurchasable(ValidationError):
    item_id: ItemId

    def __str__(self) -> str:  # pragma: no cover
        return f"not_purchasable: id={self.item_id} ({self.message})"


# ---- remote system ---------------------------------------------------------


@dataclass(frozen=True)
class GatewayError(StorefrontError):
    path: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}: {self.path} ({self.message})"


@dataclass(frozen=True)
class RemoteUnavailable(GatewayError):
    pass


@dataclass(frozen=True)
class MalformedResponse(GatewayError):
    pass


@dataclass(frozen=True)
class OrderRejected(GatewayError):
    status_code: int

    def __str__(self) -> str:  # pragma: no cover
        return f"order_rejected: status={self.status_code} ({self.message})"
