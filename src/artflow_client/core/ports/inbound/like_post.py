from __future__ import annotations

from typing import Protocol

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import Post
from artflow_client.core.domain.model.errors import StorefrontError


class LikePostUseCase(Protocol):
    async def like_post(self, post: Post) -> IOResult[Post | None, StorefrontError]:
        """Success carries the post as held locally after the like, or None if it is gone."""
        ...
