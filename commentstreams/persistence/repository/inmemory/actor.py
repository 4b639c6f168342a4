"""In-memory actor repository for testing."""

from typing import Optional

from commentstreams.domain.model import Actor
from commentstreams.domain.repository.actor import ActorRepository
from commentstreams.domain.value import ActorId


class InMemoryActorRepository(ActorRepository):
    """In-memory implementation of ActorRepository for testing."""

    def __init__(self) -> None:
        self._actors: dict[ActorId, Actor] = {}

    async def find_by_id(self, actor_id: ActorId) -> Optional[Actor]:
        return self._actors.get(actor_id)

    async def save(self, actor: Actor) -> Actor:
        self._actors[actor.id] = actor
        return actor
