from __future__ import annotations

from dataclasses import dataclass

from returns.io import IOResult

from artflow_client.core.domain.model.catalog import ItemId, Post
from artflow_client.core.domain.model.errors import StorefrontError
from artflow_client.core.domain.model.state import with_like
from artflow_client.core.ports.inbound.like_post import LikePostUseCase
from artflow_client.core.ports.outbound.state import StateStore
from artflow_client.core.ports.outbound.storefront_gateway import StorefrontGateway


@dataclass(frozen=True)
class EngagementDeps:
    gateway: StorefrontGateway
    state: StateStore


@dataclass(frozen=True)
class EngagementService(LikePostUseCase):
    """
    Confirm-then-apply: the local count moves only after the like request
    has come back, and it moves by exactly one whatever the backend says.
    """

    deps: EngagementDeps

    async def like_post(self, post: Post) -> IOResult[Post | None, StorefrontError]:
        sent = await self.deps.gateway.like_post(post.id)
        return sent.map(lambda _: self._apply(post.id))

    def _apply(self, post_id: ItemId) -> Post | None:
        state = self.deps.state.update(lambda s: with_like(s, post_id))
        return state.find_post(post_id)
