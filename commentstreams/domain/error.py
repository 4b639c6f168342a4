"""Domain layer errors.

Errors that reach the request boundary carry a ``message_key`` naming the
localized message shown to the user.
"""


class DomainError(Exception):
    """Base domain error."""

    message_key: str = "commentstreams-api-error-generic"


class ValidationError(DomainError):
    """Domain validation error."""

    message_key = "commentstreams-api-error-invalid"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    message_key = "commentstreams-api-error-notfound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PermissionDeniedError(DomainError):
    """Raised when an actor lacks the capability an operation requires."""

    message_key = "commentstreams-api-error-post-permissions"

    def __init__(self, actor_id: str, right: str):
        self.actor_id = actor_id
        self.right = right
        super().__init__(f"Actor {actor_id} does not have the '{right}' right")


class ParentNotFoundError(DomainError):
    """Raised when a reply's parent comment or its page cannot be resolved.

    Both causes share one message so the caller cannot tell them apart.
    """

    message_key = "commentstreams-api-error-post-parentpagedoesnotexist"

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"Parent comment does not exist: {parent_id}")


class PersistFailureError(DomainError):
    """Raised when the comment store fails to persist a comment."""

    message_key = "commentstreams-api-error-post"

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"Failed to persist reply to comment {parent_id}")


class NotACommentError(DomainError):
    """Raised when a page expected to be a comment is not one."""

    message_key = "commentstreams-api-error-notacomment"

    def __init__(self, page_id: str):
        self.page_id = page_id
        super().__init__(f"Page {page_id} is not a comment")
