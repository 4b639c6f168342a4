"""Actor identity forwarded by the host wiki.

The service sits behind the wiki, which authenticates the user and passes
the actor ID in the ``X-Actor-Id`` header.
"""

from fastapi import Header

from commentstreams.domain.value import ActorId
from commentstreams.interface.error import MissingActorError

ACTOR_HEADER = "X-Actor-Id"


def optional_actor_id(
    x_actor_id: int | None = Header(default=None, alias=ACTOR_HEADER),
) -> ActorId | None:
    """Return the requesting actor's ID, if the request carries one."""
    if x_actor_id is None:
        return None
    return ActorId(x_actor_id)


def required_actor_id(
    x_actor_id: int | None = Header(default=None, alias=ACTOR_HEADER),
) -> ActorId:
    """Return the requesting actor's ID.

    Raises:
        MissingActorError: If the header is absent
    """
    if x_actor_id is None:
        raise MissingActorError("Request does not identify an actor")
    return ActorId(x_actor_id)
