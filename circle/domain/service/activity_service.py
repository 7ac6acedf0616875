"""Activity feed domain service."""

import logfire

from circle.domain.model import ActivityEntry, User
from circle.domain.repository import (
    LikedPostRepository,
    PostRepository,
    SharedPostRepository,
)
from circle.domain.value import ActivityKind

from .base import Service


class ActivityService(Service):
    """Merges a user's posts, likes and shares into one feed."""

    def __init__(
        self,
        post_repository: PostRepository,
        liked_post_repository: LikedPostRepository,
        shared_post_repository: SharedPostRepository,
    ) -> None:
        """Initialize activity service.

        Args:
            post_repository: Post repository
            liked_post_repository: Like repository
            shared_post_repository: Share repository
        """
        self.post_repository = post_repository
        self.liked_post_repository = liked_post_repository
        self.shared_post_repository = shared_post_repository

    async def get_activity(self, user: User) -> list[ActivityEntry]:
        """Build the activity feed of a resolved user.

        Algorithm:
        1. Authored posts become POSTED entries (post id, post time)
        2. Likes become LIKED entries (liked post id, like time)
        3. Shares become SHARED entries (shared post id, share time)
        4. Concatenate POSTED, LIKED, SHARED and sort newest first

        Entries with equal timestamps are ordered POSTED, LIKED, SHARED.

        Args:
            user: User whose activity to build (must exist)

        Returns:
            Activity entries, most recent first
        """
        with logfire.span("activity_service.get_activity", user_id=str(user.id)):
            posts = await self.post_repository.find_by_author(user.id)
            posted = [
                ActivityEntry(
                    kind=ActivityKind.POSTED, post_id=p.id, timestamp=p.created_at
                )
                for p in posts
            ]

            likes = await self.liked_post_repository.find_by_user(user.id)
            liked = [
                ActivityEntry(
                    kind=ActivityKind.LIKED,
                    post_id=like.post_id,
                    timestamp=like.created_at,
                )
                for like in likes
            ]

            shares = await self.shared_post_repository.find_by_user(user.id)
            shared = [
                ActivityEntry(
                    kind=ActivityKind.SHARED,
                    post_id=share.post_id,
                    timestamp=share.created_at,
                )
                for share in shares
            ]

            activity = sort_activity([*posted, *liked, *shared])

            logfire.info(
                "Activity built",
                user_id=str(user.id),
                posted=len(posted),
                liked=len(liked),
                shared=len(shared),
            )
            return activity


def sort_activity(entries: list[ActivityEntry]) -> list[ActivityEntry]:
    """Sort entries newest first, ties broken by kind priority.

    Two stable passes: kind priority first, then timestamp descending.
    ``reverse=True`` keeps the relative order of equal timestamps.
    """
    by_kind = sorted(entries, key=lambda e: e.kind.priority)
    return sorted(by_kind, key=lambda e: e.timestamp, reverse=True)
