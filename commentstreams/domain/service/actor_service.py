"""Actor domain service."""

import logfire

from commentstreams.domain.error import NotFoundError
from commentstreams.domain.model import Actor
from commentstreams.domain.repository import ActorRepository
from commentstreams.domain.value import ActorId

from .base import Service


class ActorService(Service):
    """Domain service for actor lookups."""

    def __init__(self, actor_repository: ActorRepository) -> None:
        self.actor_repository = actor_repository

    async def get_by_id(self, actor_id: ActorId) -> Actor:
        """Get actor by ID.

        Raises:
            NotFoundError: If actor not found
        """
        with logfire.span("actor_service.get_by_id", actor_id=actor_id):
            actor = await self.actor_repository.find_by_id(actor_id)
            if not actor:
                logfire.warn("Actor not found", actor_id=actor_id)
                raise NotFoundError("Actor", str(actor_id))
            return actor
