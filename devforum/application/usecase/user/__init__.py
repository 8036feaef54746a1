"""User use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from .user_content import (
    ListUserAnswersUseCase,
    ListUserQuestionsUseCase,
    UserAnswersResponse,
    UserContentRequest,
    UserQuestionsResponse,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ListUserAnswersUseCase",
    "ListUserQuestionsUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "UserAnswersResponse",
    "UserContentRequest",
    "UserQuestionsResponse",
]
