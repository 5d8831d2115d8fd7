from __future__ import annotations

from typing import Protocol

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import Catalog
from artflow_client.core.domain.model.errors import StorefrontError


class LoadCatalogUseCase(Protocol):
    async def load(self) -> IOResult[Catalog, StorefrontError]: ...
