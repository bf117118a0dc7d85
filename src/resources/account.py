"""Account adapter: the authenticated user's profile."""

from __future__ import annotations

from src.models.requests import NoOptions
from src.models.schemas import UserProfile
from src.resources.base import ResourceAdapter

USER_PROFILE: ResourceAdapter[NoOptions, UserProfile] = ResourceAdapter(
    name="profile",
    path="/api/user/me",
    options_model=NoOptions,
    response_type=UserProfile,
)
