"""Answer domain service."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional
from uuid import uuid4

import logfire

from devforum.config import ReputationSettings
from devforum.domain.error import NotAuthorizedError, NotFoundError
from devforum.domain.model import Answer, Question, User
from devforum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from devforum.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .ranking import sort_answers
from .reputation_service import ReputationService


@dataclass
class AcceptanceResult:
    """State after toggling an answer's accepted flag."""

    answer: Answer
    question: Question
    accepted: bool
    unaccepted_ids: list[AnswerId] = field(default_factory=list)


class AnswerService(Service):
    """Domain service for answers and accepted-answer bookkeeping."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
        reputation_service: ReputationService,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            comment_repository: Comment repository
            reputation_service: Reputation ledger
            reputation_settings: Reputation ledger options
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.comment_repository = comment_repository
        self.reputation_service = reputation_service
        self.reputation_settings = reputation_settings

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, body: str
    ) -> Answer:
        """Post an answer to a question and register it on the question.

        Args:
            question_id: Question being answered
            author_id: Answer author
            body: Answer text

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            question = await self.question_repository.find_by_id(
                question_id, for_update=True
            )
            if not question:
                logfire.warn("Answer to non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            now = datetime.now(UTC)
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                body=body,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)

            await self.question_repository.save(
                question.model_copy(
                    update={"answer_ids": [*question.answer_ids, saved.id]}
                )
            )
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answers_for_question(self, question_id: QuestionId) -> list[Answer]:
        """Answers to a question, accepted first, then by votes, then oldest first."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question_id)
        ):
            answers = await self.answer_repository.find_by_question(question_id)
            return sort_answers(answers)

    async def get_answers_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> tuple[list[Answer], int]:
        """Answers written by a user, newest first, with the total count."""
        answers = await self.answer_repository.find_by_author(author_id, limit, offset)
        total = await self.answer_repository.count_by_author(author_id)
        return answers, total

    async def toggle_acceptance(
        self, answer_id: AnswerId, actor_id: UserId
    ) -> AcceptanceResult:
        """Accept an answer or withdraw its acceptance.

        Accepting clears the flag on every other answer of the question,
        credits the accept award to the answer's author and marks the question
        answered with this answer selected. Withdrawing only clears the flag;
        the award and the question's answered state stay unless
        revoke_on_unaccept is enabled.

        Args:
            answer_id: Answer to toggle
            actor_id: User requesting the change

        Returns:
            Updated answer and question

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the actor is not the question's author
        """
        with logfire.span(
            "answer_service.toggle_acceptance",
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer, question = await self._lock_for_update(answer_id)
            if not question:
                logfire.error(
                    "Answer references missing question",
                    answer_id=str(answer_id),
                    question_id=str(answer.question_id),
                )
                raise NotFoundError("Question", str(answer.question_id))

            if question.author_id != actor_id:
                logfire.warn(
                    "Accept by non-author rejected",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError(
                    "accept", "answer", str(answer_id), str(actor_id)
                )

            now = datetime.now(UTC)
            if not answer.is_accepted:
                return await self._accept(answer, question, now)
            return await self._unaccept(answer, question, now)

    async def _lock_for_update(
        self, answer_id: AnswerId
    ) -> tuple[Answer, Optional[Question]]:
        """Lock an answer's question, then the answer itself.

        Question first, the same order question deletion takes, so concurrent
        acceptance and deletion on one question serialize.

        Raises:
            NotFoundError: If the answer does not exist or is deleted while
                waiting for the question lock
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))

        question = await self.question_repository.find_by_id(
            answer.question_id, for_update=True
        )
        locked = await self.answer_repository.find_by_id(answer_id, for_update=True)
        if not locked:
            raise NotFoundError("Answer", str(answer_id))
        return locked, question

    async def _accept(
        self, answer: Answer, question: Question, now: datetime
    ) -> AcceptanceResult:
        unaccepted = await self.answer_repository.unaccept_others(
            question.id, keep=answer.id
        )
        accepted = await self.answer_repository.save(
            answer.model_copy(update={"is_accepted": True, "updated_at": now})
        )
        await self.reputation_service.award_acceptance(answer.author_id)
        updated_question = await self.question_repository.save(
            question.model_copy(
                update={
                    "is_answered": True,
                    "selected_answer_id": answer.id,
                    "updated_at": now,
                }
            )
        )
        logfire.info(
            "Answer accepted",
            answer_id=str(answer.id),
            question_id=str(question.id),
            unaccepted=[str(a) for a in unaccepted],
        )
        return AcceptanceResult(
            answer=accepted,
            question=updated_question,
            accepted=True,
            unaccepted_ids=unaccepted,
        )

    async def _unaccept(
        self, answer: Answer, question: Question, now: datetime
    ) -> AcceptanceResult:
        unaccepted = await self.answer_repository.save(
            answer.model_copy(update={"is_accepted": False, "updated_at": now})
        )
        updated_question = question
        if self.reputation_settings.revoke_on_unaccept:
            await self.reputation_service.revoke_acceptance(answer.author_id)
            if question.selected_answer_id == answer.id:
                updated_question = await self.question_repository.save(
                    question.model_copy(
                        update={
                            "is_answered": False,
                            "selected_answer_id": None,
                            "updated_at": now,
                        }
                    )
                )
        logfire.info(
            "Answer acceptance withdrawn",
            answer_id=str(answer.id),
            question_id=str(question.id),
            revoked=self.reputation_settings.revoke_on_unaccept,
        )
        return AcceptanceResult(
            answer=unaccepted, question=updated_question, accepted=False
        )

    async def delete_answer(self, answer_id: AnswerId, actor: User) -> None:
        """Delete an answer with its comments and detach it from its question.

        Args:
            answer_id: Answer to delete
            actor: User requesting the deletion

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            actor_id=str(actor.id),
        ):
            answer, question = await self._lock_for_update(answer_id)
            if answer.author_id != actor.id and not actor.is_admin:
                logfire.warn(
                    "Answer deletion rejected",
                    answer_id=str(answer_id),
                    actor_id=str(actor.id),
                )
                raise NotAuthorizedError("delete", "answer", str(answer_id), str(actor.id))

            await self.comment_repository.delete_by_answers([answer_id])
            await self.answer_repository.delete(answer_id)

            if question:
                update: dict[str, object] = {
                    "answer_ids": [a for a in question.answer_ids if a != answer_id]
                }
                if question.selected_answer_id == answer_id:
                    update["selected_answer_id"] = None
                    update["is_answered"] = False
                await self.question_repository.save(question.model_copy(update=update))

            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )
