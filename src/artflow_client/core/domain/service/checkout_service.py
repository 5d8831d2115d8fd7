from __future__ import annotations

import logging
from dataclasses import dataclass

from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure

from artflow_client.core.domain.model.cart import Cart
from artflow_client.core.domain.model.errors import (
    EmptyCart,
    OrderRejected,
    StorefrontError,
)
from artflow_client.core.domain.model.state import with_empty_cart
from artflow_client.core.domain.service.validation import validate_checkout_details
from artflow_client.core.ports.inbound.checkout import CheckoutUseCase, OrderConfirmation
from artflow_client.core.ports.outbound.input import CheckoutDetails, InputCollector
from artflow_client.core.ports.outbound.notifications import (
    CartIsEmpty,
    Notifier,
    OrderPlaced,
)
from artflow_client.core.ports.outbound.state import StateStore
from artflow_client.core.ports.outbound.storefront_gateway import (
    OrderLineRequest,
    OrderRequest,
    OrderResponse,
    StorefrontGateway,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutDeps:
    gateway: StorefrontGateway
    state: StateStore
    input: InputCollector
    notifier: Notifier
    # True keeps the historical behavior: any order response empties the cart,
    # whatever its status. False keeps the cart when the backend rejects it.
    clear_cart_on_rejection: bool = True


@dataclass(frozen=True)
class CheckoutService(CheckoutUseCase):
    deps: CheckoutDeps

    async def checkout(self) -> IOResult[OrderConfirmation, StorefrontError]:
        cart = self.deps.state.current().cart
        if not cart:
            self.deps.notifier.notify(CartIsEmpty())
            return IOFailure(EmptyCart("cart is empty"))

        details = await self.deps.input.collect_checkout_details()
        validated = validate_checkout_details(details)
        if isinstance(validated, Failure):
            logger.info("checkout aborted: %s", validated.failure())
            return IOResult.from_result(validated)

        request = build_order_request(validated.unwrap(), cart)
        response = await self.deps.gateway.submit_order(request)
        return response.bind(lambda r: self._settle(r, len(request.items)))

    def _settle(
        self, response: OrderResponse, line_count: int
    ) -> IOResult[OrderConfirmation, StorefrontError]:
        if not response.accepted:
            if not self.deps.clear_cart_on_rejection:
                logger.warning(
                    "order rejected with status %d; cart kept", response.status_code
                )
                return IOFailure(
                    OrderRejected(
                        message="order was not accepted",
                        path="/orders",
                        status_code=response.status_code,
                    )
                )
            logger.warning(
                "order rejected with status %d; clearing cart anyway",
                response.status_code,
            )

        self.deps.state.update(with_empty_cart)
        self.deps.notifier.notify(OrderPlaced(subtotal=response.subtotal))
        return IOSuccess(
            OrderConfirmation(
                subtotal=response.subtotal,
                status_code=response.status_code,
                line_count=line_count,
            )
        )


def build_order_request(details: CheckoutDetails, cart: Cart) -> OrderRequest:
    # client-held prices go out as-is; the backend owns the subtotal
    return OrderRequest(
        buyer_name=details.buyer_name,
        buyer_email=details.buyer_email,
        shipping_address=details.shipping_address,
        items=tuple(
            OrderLineRequest(
                item_id=line.item_id, quantity=line.quantity, price=line.item.price
            )
            for line in cart
        ),
    )
