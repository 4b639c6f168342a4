"""CSRF token domain service."""

import logfire

from commentstreams.config import AuthSettings
from commentstreams.domain.value import ActorId
from commentstreams.util.jwt import JWTError, create_token, verify_token

from .base import Service


class CsrfTokenService(Service):
    """Issues and checks per-actor tokens guarding state-changing requests.

    Tokens are signed JWTs naming the actor, so they need no storage. They
    expire after `auth.csrf_token_expiry_minutes` or when the secret changes.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue(self, actor_id: ActorId) -> str:
        """Return a fresh token for an actor."""
        with logfire.span("csrf_token_service.issue", actor_id=actor_id):
            return create_token(actor_id, self.auth_settings)

    def verify(self, actor_id: ActorId, token: str | None) -> bool:
        """Check a token presented by an actor."""
        if not token:
            logfire.warn("CSRF token missing", actor_id=actor_id)
            return False
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("CSRF token rejected", actor_id=actor_id, error=str(e))
            return False
        if payload.sub != str(actor_id):
            logfire.warn("CSRF token mismatch", actor_id=actor_id)
            return False
        return True
