from __future__ import annotations


import httpx
import pytest

from stub_backend import create_stub_backend
from support import RecordingNotifier, ScriptedInput, artwork, post, supply

from artflow_client.adapters.inbound.cli import render_state, run_cli
from artflow_client.adapters.outbound.http_gateway import HttpStorefrontGateway
from artflow_client.bootstrap import build_usecases
from artflow_client.config import Settings
from artflow_client.core.domain.model.catalog import Catalog
from artflow_client.core.domain.model.state import (
    StorefrontState,
    with_catalog,
    with_item_in_cart,
    with_loading,
)
from artflow_client.core.ports.outbound.input import CheckoutDetails, InquiryDetails
from artflow_client.core.ports.outbound.notifications import InquirySent, OrderPlaced

CATALOG = {
    "artworks": [
        {"id": "w1", "title": "Tide", "medium": "Oil", "year": 2022, "price": 900, "currency": "USD"},
        {"id": "w2", "title": "Untitled"},
    ],
    "supplies": [
        {"id": "s1", "title": "Sable brush", "price": 10, "currency": "USD", "category": "brushes"},
        {"id": "s2", "title": "Gesso", "price": 5, "currency": "USD", "category": "grounds", "brand": "Liquitex"},
    ],
    "posts": [
        {"id": "p1", "author_name": "ana", "content": "first layer", "tags": ["oil", "wip"]},
    ],
}

SETTINGS = Settings(
    backend_url="http://testserver",
    http_timeout=5.0,
    clear_cart_on_rejected_order=True,
    log_level="INFO",
)


@pytest.fixture
async def storefront():
    backend = create_stub_backend(CATALOG)
    scripted = ScriptedInput()
    notifier = RecordingNotifier()
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=backend), base_url=SETTINGS.backend_url
    ) as client:
        usecases = build_usecases(
            SETTINGS,
            gateway=HttpStorefrontGateway(client),
            input=scripted,
            notifier=notifier,
        )
        yield usecases, backend, scripted, notifier


async def test_browse_renders_every_section(storefront):
    usecases, *_ = storefront
    out = []

    code = await run_cli(usecases, "browse", [], write=out.append)

    assert code == 0
    text = out[0]
    assert "Tide [w1]" in text
    assert "Oil • 2022" in text
    assert "Guide: USD 900" in text
    assert "Mixed media" in text  # w2 has no medium
    assert "Generic • brushes" in text
    assert "Liquitex • grounds" in text
    assert "oil • wip" in text
    assert "❤️ 0" in text


async def test_buy_merges_repeats_and_places_order(storefront):
    usecases, backend, scripted, notifier = storefront
    scripted.checkout = CheckoutDetails("Mina", "mina@example.com", "1 Canvas Rd")
    out = []

    code = await run_cli(usecases, "buy", ["s1", "s1", "s2"], write=out.append)

    assert code == 0
    assert backend.state.received == [
        (
            "order",
            {
                "buyer_name": "Mina",
                "buyer_email": "mina@example.com",
                "shipping_address": "1 Canvas Rd",
                "items": [
                    {"item_id": "s1", "quantity": 2, "price": 10.0},
                    {"item_id": "s2", "quantity": 1, "price": 5.0},
                ],
            },
        )
    ]
    assert notifier.notices == [OrderPlaced(subtotal="25.0")]
    assert usecases.state.current().cart == ()
    assert "Cart (3)" in out[0]


async def test_buy_unknown_supply_is_usage_error(storefront):
    usecases, backend, *_ = storefront
    out = []

    code = await run_cli(usecases, "buy", ["nope"], write=out.append)

    assert code == 2
    assert backend.state.received == []


async def test_inquire_sends_default_message(storefront):
    usecases, backend, scripted, notifier = storefront
    scripted.inquiry = InquiryDetails("Leo", "leo@example.com", "")

    code = await run_cli(usecases, "inquire", ["w1"], write=lambda _: None)

    assert code == 0
    assert backend.state.received[0][1]["message"] == "Interested in this piece."
    assert notifier.notices == [InquirySent(artwork_id="w1", artwork_title="Tide")]


async def test_cancelled_inquiry_exits_with_failure(storefront):
    usecases, backend, *_ = storefront
    out = []

    code = await run_cli(usecases, "inquire", ["w1"], write=out.append)

    assert code == 1
    assert out[-1].startswith("[ng]")
    assert backend.state.received == []


async def test_like_prints_new_count(storefront):
    usecases, backend, *_ = storefront
    out = []

    code = await run_cli(usecases, "like", ["p1"], write=out.append)

    assert code == 0
    assert out == ["[ok] p1 likes=1"]
    assert backend.state.received == [("like", {"post_id": "p1"})]


async def test_unreachable_backend_fails_load(scripted_input, notifier):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(refuse), base_url="http://nowhere"
    ) as client:
        usecases = build_usecases(
            SETTINGS, HttpStorefrontGateway(client), scripted_input, notifier
        )
        out = []
        code = await run_cli(usecases, "browse", [], write=out.append)

    assert code == 1
    assert usecases.state.current().loading is False


def test_render_state_shows_loading_and_cart_badge():
    s = with_item_in_cart(with_item_in_cart(StorefrontState(), supply("a")), supply("a"))

    text = render_state(s)

    assert "Cart (2)" in text
    assert text.count("Loading...") == 3


def test_render_state_omits_guide_price_when_absent():
    s = with_loading(
        with_catalog(StorefrontState(), Catalog((artwork("w9"),), (), (post("p9", likes=3),))),
        False,
    )

    text = render_state(s)

    assert "Guide:" not in text
    assert "❤️ 3" in text
