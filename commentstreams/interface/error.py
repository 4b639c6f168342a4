"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    message_key: str = "commentstreams-api-error-generic"


class MissingActorError(InterfaceError):
    """Raised when a request that needs an actor does not identify one."""

    message_key = "commentstreams-api-error-noactor"


class InvalidTokenError(InterfaceError):
    """Raised when a state-changing request carries a bad CSRF token."""

    message_key = "apierror-badtoken"
