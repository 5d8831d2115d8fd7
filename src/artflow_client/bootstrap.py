from __future__ import annotations

from dataclasses import dataclass

from artflow_client.adapters.outbound.in_memory_state import InMemoryStateStore
from artflow_client.config import Settings
from artflow_client.core.domain.service.cart_service import CartDeps, CartService
from artflow_client.core.domain.service.catalog_loader_service import (
    CatalogLoaderDeps,
    CatalogLoaderService,
)
from artflow_client.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from artflow_client.core.domain.service.engagement_service import (
    EngagementDeps,
    EngagementService,
)
from artflow_client.core.domain.service.inquiry_service import (
    InquiryDeps,
    InquiryService,
)
from artflow_client.core.ports.outbound.input import InputCollector
from artflow_client.core.ports.outbound.notifications import Notifier
from artflow_client.core.ports.outbound.state import StateStore
from artflow_client.core.ports.outbound.storefront_gateway import StorefrontGateway


@dataclass(frozen=True)
class UseCases:
    state: StateStore
    load_catalog: CatalogLoaderService
    cart: CartService
    checkout: CheckoutService
    like_post: EngagementService
    inquire: InquiryService


def build_usecases(
    settings: Settings,
    gateway: StorefrontGateway,
    input: InputCollector,
    notifier: Notifier,
) -> UseCases:
    state = InMemoryStateStore()

    return UseCases(
        state=state,
        load_catalog=CatalogLoaderService(CatalogLoaderDeps(gateway=gateway, state=state)),
        cart=CartService(CartDeps(state=state)),
        checkout=CheckoutService(
            CheckoutDeps(
                gateway=gateway,
                state=state,
                input=input,
                notifier=notifier,
                clear_cart_on_rejection=settings.clear_cart_on_rejected_order,
            )
        ),
        like_post=EngagementService(EngagementDeps(gateway=gateway, state=state)),
        inquire=InquiryService(
            InquiryDeps(gateway=gateway, input=input, notifier=notifier)
        ),
    )
