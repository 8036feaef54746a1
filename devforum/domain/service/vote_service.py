"""Vote domain service."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

import logfire

from devforum.domain.error import NotFoundError
from devforum.domain.model import Answer, Question, VoteOutcome, apply_vote
from devforum.domain.repository import AnswerRepository, QuestionRepository
from devforum.domain.value import AnswerId, QuestionId, UserId, VoteValue

from .base import Service
from .reputation_service import ReputationService

T = TypeVar("T", Question, Answer)


@dataclass
class VoteResult(Generic[T]):
    """Voted entity after the change, with what the vote did."""

    target: T
    outcome: VoteOutcome
    reputation_delta: int


class VoteService(Service):
    """Domain service for voting on questions and answers.

    Each vote is one transaction script: lock the target, apply the vote to
    its vote set, persist the new set, then propagate reputation. The
    request-scoped session commits all of it together or nothing.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            reputation_service: Reputation ledger
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.reputation_service = reputation_service

    async def vote_on_question(
        self, question_id: QuestionId, user_id: UserId, value: object
    ) -> VoteResult[Question]:
        """Cast, flip or withdraw a user's vote on a question.

        Args:
            question_id: Question ID
            user_id: Voting user ID
            value: Requested vote value, 1 or -1

        Returns:
            Updated question with the vote outcome

        Raises:
            InvalidVoteValueError: If value is not 1 or -1
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "vote_service.vote_on_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            direction = VoteValue.parse(value)
            question = await self.question_repository.find_by_id(
                question_id, for_update=True
            )
            if not question:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            outcome = apply_vote(question.votes, user_id, direction)
            updated = question.model_copy(
                update={"votes": outcome.votes, "updated_at": datetime.now(UTC)}
            )
            saved = await self.question_repository.save(updated)

            delta = await self.reputation_service.apply_vote(
                question.author_id, user_id, outcome
            )
            logfire.info(
                "Question vote applied",
                question_id=str(question_id),
                action=outcome.action.value,
                score_delta=outcome.score_delta,
                vote_count=saved.vote_count,
            )
            return VoteResult(target=saved, outcome=outcome, reputation_delta=delta)

    async def vote_on_answer(
        self, answer_id: AnswerId, user_id: UserId, value: object
    ) -> VoteResult[Answer]:
        """Cast, flip or withdraw a user's vote on an answer.

        Args:
            answer_id: Answer ID
            user_id: Voting user ID
            value: Requested vote value, 1 or -1

        Returns:
            Updated answer with the vote outcome

        Raises:
            InvalidVoteValueError: If value is not 1 or -1
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "vote_service.vote_on_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            direction = VoteValue.parse(value)
            answer = await self.answer_repository.find_by_id(answer_id, for_update=True)
            if not answer:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            outcome = apply_vote(answer.votes, user_id, direction)
            updated = answer.model_copy(
                update={"votes": outcome.votes, "updated_at": datetime.now(UTC)}
            )
            saved = await self.answer_repository.save(updated)

            delta = await self.reputation_service.apply_vote(
                answer.author_id, user_id, outcome
            )
            logfire.info(
                "Answer vote applied",
                answer_id=str(answer_id),
                action=outcome.action.value,
                score_delta=outcome.score_delta,
                vote_count=saved.vote_count,
            )
            return VoteResult(target=saved, outcome=outcome, reputation_delta=delta)
