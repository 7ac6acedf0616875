"""Get user activity use case."""

from datetime import datetime

from pydantic import BaseModel

from circle.application.usecase.base import BaseUseCase
from circle.domain.service import ActivityService, ProfileGuard
from circle.domain.value import ActivityKind, Username


class GetUserActivityRequest(BaseModel):
    """Get user activity request."""

    username: Username
    authorization: str | None = None


class ActivityEntryResponse(BaseModel):
    """One activity feed entry."""

    kind: ActivityKind
    post_id: str
    timestamp: datetime


class GetUserActivityUseCase(BaseUseCase):
    """Use case for a user's merged post/like/share feed."""

    def __init__(
        self, profile_guard: ProfileGuard, activity_service: ActivityService
    ) -> None:
        """Initialize get user activity use case.

        Args:
            profile_guard: Profile access guard
            activity_service: Activity domain service
        """
        self.profile_guard = profile_guard
        self.activity_service = activity_service

    async def execute(
        self, request: GetUserActivityRequest
    ) -> list[ActivityEntryResponse]:
        """Execute get activity flow.

        The target is resolved by the guard before any activity query, so
        an unknown username fails without touching posts, likes or shares.

        Returns:
            Activity entries, most recent first
        """
        access = await self.profile_guard.check(
            request.username, request.authorization
        )
        entries = await self.activity_service.get_activity(access.target)
        access.applied()

        return [
            ActivityEntryResponse(
                kind=entry.kind,
                post_id=str(entry.post_id),
                timestamp=entry.timestamp,
            )
            for entry in entries
        ]
