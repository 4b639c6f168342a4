"""Log entry entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentstreams.domain.model.common import DomainModel
from commentstreams.domain.value import LOG_TYPE, ActorId, LogId, PageId


class LogEntry(DomainModel):
    """Audit log entry for an action performed on a comment.

    ``published`` tells whether the entry also shows up in the recent
    changes feed. Unpublished entries are still part of the log.
    """

    id: Optional[LogId] = None  # Assigned on insert
    log_type: str = LOG_TYPE
    action: str
    performer_id: ActorId
    target_page_id: PageId
    created_at: datetime = Field(default_factory=datetime.now)
    published: bool = False
