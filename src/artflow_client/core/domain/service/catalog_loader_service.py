from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Tuple

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import Artwork, Catalog, Post, Supply
from artflow_client.core.domain.model.errors import StorefrontError
from artflow_client.core.domain.model.state import with_catalog, with_loading
from artflow_client.core.ports.inbound.load_catalog import LoadCatalogUseCase
from artflow_client.core.ports.outbound.state import StateStore
from artflow_client.core.ports.outbound.storefront_gateway import StorefrontGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogLoaderDeps:
    gateway: StorefrontGateway
    state: StateStore


@dataclass(frozen=True)
class CatalogLoaderService(LoadCatalogUseCase):
    deps: CatalogLoaderDeps

    async def load(self) -> IOResult[Catalog, StorefrontError]:
        self.deps.state.update(lambda s: with_loading(s, True))
        try:
            artworks, supplies, posts = await asyncio.gather(
                self.deps.gateway.fetch_artworks(),
                self.deps.gateway.fetch_supplies(),
                self.deps.gateway.fetch_posts(),
            )
            # all three or nothing: no collection is exposed on a partial load
            return (
                _join(artworks, supplies, posts)
                .map(self._expose)
                .alt(_report_failure)
            )
        finally:
            self.deps.state.update(lambda s: with_loading(s, False))

    def _expose(self, catalog: Catalog) -> Catalog:
        self.deps.state.update(lambda s: with_catalog(s, catalog))
        logger.info(
            "catalog loaded: %d artworks, %d supplies, %d posts",
            len(catalog.artworks),
            len(catalog.supplies),
            len(catalog.posts),
        )
        return catalog


def _join(
    artworks: IOResult[Tuple[Artwork, ...], StorefrontError],
    supplies: IOResult[Tuple[Supply, ...], StorefrontError],
    posts: IOResult[Tuple[Post, ...], StorefrontError],
) -> IOResult[Catalog, StorefrontError]:
    return artworks.bind(
        lambda a: supplies.bind(lambda s: posts.map(lambda p: Catalog(a, s, p)))
    )


def _report_failure(err: StorefrontError) -> StorefrontError:
    logger.error("catalog load failed: %s", err)
    return err
