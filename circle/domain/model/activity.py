"""Activity feed entries.

Entries are derived on read from posts, likes and shares; they are never
stored.
"""

from datetime import datetime

from circle.domain.model.common import DomainModel
from circle.domain.value import ActivityKind, PostId


class ActivityEntry(DomainModel):
    """One timestamped action in a user's activity feed.

    ``post_id`` is always the post acted upon, never the id of the like
    or share record.
    """

    kind: ActivityKind
    post_id: PostId
    timestamp: datetime
