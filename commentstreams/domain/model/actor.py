"""Actor entity.

An actor is whoever performs an action on the wiki: a registered user or an
anonymous visitor. Rights are granted by the host wiki.
"""

from pydantic import Field

from commentstreams.domain.model.common import DomainModel
from commentstreams.domain.value import ActorId, ActorRight


class Actor(DomainModel):
    """Actor entity."""

    id: ActorId
    name: str = Field(min_length=1, max_length=255)
    real_name: str | None = None
    rights: frozenset[str] = frozenset()

    @property
    def display_name(self) -> str:
        """Name shown next to comments posted by this actor."""
        return self.real_name or self.name

    def has_right(self, right: ActorRight | str) -> bool:
        """Check whether the actor holds a right."""
        value = right.value if isinstance(right, ActorRight) else right
        return value in self.rights
