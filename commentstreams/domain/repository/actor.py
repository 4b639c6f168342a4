"""Actor repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from commentstreams.domain.model import Actor
from commentstreams.domain.value import ActorId


class ActorRepository(ABC):
    """Repository for Actor entity."""

    @abstractmethod
    async def find_by_id(self, actor_id: ActorId) -> Optional[Actor]:
        """Find an actor by ID.

        Args:
            actor_id: The actor ID

        Returns:
            The actor with its rights if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, actor: Actor) -> Actor:
        """Save an actor (create or update)."""
        pass
