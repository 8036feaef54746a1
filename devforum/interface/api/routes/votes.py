"""Vote routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header
from pydantic import BaseModel

from devforum.application.usecase.vote import VoteRequest, VoteResponse, VoteUseCase
from devforum.domain.service import JWTService
from devforum.domain.value import VotableType
from devforum.interface.api.auth import require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting. value must be 1 (up) or -1 (down)."""

    value: Any


async def _vote(
    votable_type: VotableType,
    votable_id: UUID,
    value: Any,
    vote_use_case: VoteUseCase,
    jwt_service: JWTService,
    authorization: str | None,
) -> VoteResponse:
    user_id = require_user_id(
        jwt_service, authorization, "Authentication required to vote"
    )
    request = VoteRequest(
        votable_type=votable_type,
        votable_id=str(votable_id),
        user_id=user_id,
        value=value,
    )
    return await vote_use_case.execute(request)


@router.post("/questions/{question_id}/vote", response_model=VoteResponse)
async def vote_on_question(
    question_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Vote on a question. Repeating the same vote withdraws it.

    Raises:
        InvalidVoteValueError: If value is not 1 or -1 (400)
        NotFoundError: If the question does not exist (404)
    """
    return await _vote(
        VotableType.QUESTION,
        question_id,
        request.value,
        vote_use_case,
        jwt_service,
        authorization,
    )


@router.post("/answers/{answer_id}/vote", response_model=VoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Vote on an answer. Repeating the same vote withdraws it.

    Raises:
        InvalidVoteValueError: If value is not 1 or -1 (400)
        NotFoundError: If the answer does not exist (404)
    """
    return await _vote(
        VotableType.ANSWER,
        answer_id,
        request.value,
        vote_use_case,
        jwt_service,
        authorization,
    )
