"""PostgreSQL implementation of Actor repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commentstreams.domain.model import Actor
from commentstreams.domain.repository import ActorRepository
from commentstreams.domain.value import ActorId
from commentstreams.persistence.mappers import actor_to_dict, row_to_actor
from commentstreams.persistence.tables import actors_table


class PostgresActorRepository(ActorRepository):
    """PostgreSQL implementation of ActorRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, actor_id: ActorId) -> Optional[Actor]:
        """Find an actor by ID."""
        stmt = select(actors_table).where(actors_table.c.id == actor_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_actor(row._asdict()) if row else None

    async def save(self, actor: Actor) -> Actor:
        """Save an actor (create or update)."""
        existing = await self.find_by_id(actor.id)
        actor_dict = actor_to_dict(actor)

        if existing:
            stmt = (
                actors_table.update()
                .where(actors_table.c.id == actor.id)
                .values(**actor_dict)
            )
        else:
            stmt = actors_table.insert().values(**actor_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return actor
