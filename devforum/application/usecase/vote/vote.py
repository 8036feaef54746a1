"""Vote use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from devforum.application.usecase.base import BaseUseCase
from devforum.domain.service import VoteService
from devforum.domain.value import AnswerId, QuestionId, UserId, VotableType, VoteAction


class VoteRequest(BaseModel):
    """Vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    value: Any  # Passed through unconverted; the vote ledger accepts only 1 or -1


class VoteResponse(BaseModel):
    """Vote response."""

    votable_type: VotableType
    votable_id: str
    action: VoteAction
    vote_count: int
    my_vote: int | None  # Caller's vote after the change


class VoteUseCase(BaseUseCase):
    """Use case for voting on a question or answer.

    Voting the same way twice withdraws the vote; voting the other way flips it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            InvalidVoteValueError: If value is not 1 or -1
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote.execute",
            votable_type=request.votable_type.value,
            votable_id=request.votable_id,
        ):
            user_id = UserId(UUID(request.user_id))

            if request.votable_type == VotableType.QUESTION:
                result = await self.vote_service.vote_on_question(
                    QuestionId(UUID(request.votable_id)), user_id, request.value
                )
            else:  # VotableType.ANSWER
                result = await self.vote_service.vote_on_answer(
                    AnswerId(UUID(request.votable_id)), user_id, request.value
                )

            removed = result.outcome.action == VoteAction.REMOVED
            return VoteResponse(
                votable_type=request.votable_type,
                votable_id=request.votable_id,
                action=result.outcome.action,
                vote_count=result.target.vote_count,
                my_vote=None if removed else int(result.outcome.value),
            )
