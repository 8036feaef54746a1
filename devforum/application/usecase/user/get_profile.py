"""Get user profile use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from devforum.application.usecase.views import (
    AnswerItem,
    QuestionItem,
    answer_item,
    question_item,
)
from devforum.domain.service import AnswerService, QuestionService, UserService
from devforum.domain.value import Username

RECENT_ACTIVITY = 5


class GetProfileRequest(BaseModel):
    """Get profile request."""

    username: Username


class ProfileResponse(BaseModel):
    """Public profile. The email address is never included."""

    user_id: str
    username: str
    reputation: int
    bio: str | None
    avatar_url: str | None
    created_at: datetime
    question_count: int
    answer_count: int
    recent_questions: list[QuestionItem]
    recent_answers: list[AnswerItem]


class GetProfileUseCase:
    """Use case for a user's public profile with recent activity."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("get_profile.execute", username=request.username.root):
            user = await self.user_service.get_by_username(request.username)
            questions, question_count = (
                await self.question_service.get_questions_by_author(
                    user.id, limit=RECENT_ACTIVITY
                )
            )
            answers, answer_count = await self.answer_service.get_answers_by_author(
                user.id, limit=RECENT_ACTIVITY
            )

            return ProfileResponse(
                user_id=str(user.id),
                username=user.username.root,
                reputation=user.reputation,
                bio=user.bio,
                avatar_url=user.avatar_url,
                created_at=user.created_at,
                question_count=question_count,
                answer_count=answer_count,
                recent_questions=[
                    question_item(q, user, self.question_service.score(q))
                    for q in questions
                ],
                recent_answers=[answer_item(a, user) for a in answers],
            )
