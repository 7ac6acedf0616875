"""Strongly typed identifiers for Circle domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
SharedPostId = NewType("SharedPostId", UUID)
LikedPostId = NewType("LikedPostId", UUID)
