"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from devforum.config import ReputationSettings
from devforum.domain.error import NotAuthorizedError, NotFoundError
from devforum.domain.model import Comment
from devforum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    UserRepository,
)
from devforum.domain.service import AnswerService, ReputationService
from devforum.domain.value import AnswerId, CommentId, QuestionId
from tests.conftest import make_answer, make_question, make_user, votes_from
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_thread(unit_env, answers: int = 2):
    """A question with answers from distinct users."""
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    asker = await user_repo.save(make_user())
    question = make_question(asker.id)
    saved_answers = []
    for _ in range(answers):
        answerer = await user_repo.save(make_user())
        saved_answers.append(await answer_repo.save(make_answer(question.id, answerer.id)))
    question = await question_repo.save(
        question.model_copy(update={"answer_ids": [a.id for a in saved_answers]})
    )
    return asker, question, saved_answers


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_answer_is_registered_on_question(self, unit_env):
        """A new answer is stored and appended to the question's answer IDs."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        _, question, existing = await _seed_thread(unit_env, answers=1)
        author_id = make_user().id

        # Act
        answer = await answer_service.create_answer(
            question.id, author_id, "Try reversed(items)"
        )

        # Assert
        assert answer.is_accepted is False
        assert answer.votes == []
        saved = await question_repo.find_by_id(question.id)
        assert saved.answer_ids == [existing[0].id, answer.id]

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Answering an unknown question raises NotFoundError."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await answer_service.create_answer(
                QuestionId(uuid4()), make_user().id, "Anything"
            )


class TestToggleAcceptance:
    """Tests for toggle_acceptance."""

    @pytest.mark.asyncio
    async def test_accept_awards_answer_author(self, unit_env):
        """Accepting credits the award and marks the question answered."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        asker, question, answers = await _seed_thread(unit_env, answers=1)

        # Act
        result = await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Assert
        assert result.accepted is True
        assert result.answer.is_accepted is True
        assert result.question.is_answered is True
        assert result.question.selected_answer_id == answers[0].id
        author = await user_repo.find_by_id(answers[0].author_id)
        assert author.reputation == 15

    @pytest.mark.asyncio
    async def test_accepting_another_answer_clears_the_first(self, unit_env):
        """Only one answer of a question can be accepted at a time."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        user_repo = await unit_env.get(UserRepository)
        asker, question, (first, second) = await _seed_thread(unit_env)
        await answer_service.toggle_acceptance(first.id, asker.id)

        # Act
        result = await answer_service.toggle_acceptance(second.id, asker.id)

        # Assert
        assert result.unaccepted_ids == [first.id]
        assert result.question.selected_answer_id == second.id
        assert (await answer_repo.find_by_id(first.id)).is_accepted is False
        assert (await answer_repo.find_by_id(second.id)).is_accepted is True
        # The first award is not taken back
        assert (await user_repo.find_by_id(first.author_id)).reputation == 15
        assert (await user_repo.find_by_id(second.author_id)).reputation == 15

    @pytest.mark.asyncio
    async def test_unaccept_keeps_bonus_and_question_state(self, unit_env):
        """Withdrawing acceptance clears the flag only."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        asker, question, answers = await _seed_thread(unit_env, answers=1)
        await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Act
        result = await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Assert
        assert result.accepted is False
        assert result.answer.is_accepted is False
        saved = await question_repo.find_by_id(question.id)
        assert saved.is_answered is True
        assert saved.selected_answer_id == answers[0].id
        assert (await user_repo.find_by_id(answers[0].author_id)).reputation == 15

    @pytest.mark.asyncio
    async def test_reaccepting_awards_again(self, unit_env):
        """Accept, withdraw, accept credits the award twice."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        user_repo = await unit_env.get(UserRepository)
        asker, _, answers = await _seed_thread(unit_env, answers=1)

        # Act
        for _ in range(3):
            await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Assert
        assert (await user_repo.find_by_id(answers[0].author_id)).reputation == 30

    @pytest.mark.asyncio
    async def test_non_author_is_rejected_without_changes(self, unit_env):
        """Only the question's author may accept answers."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_repo = await unit_env.get(QuestionRepository)
        user_repo = await unit_env.get(UserRepository)
        _, question, answers = await _seed_thread(unit_env, answers=1)
        answerer_id = answers[0].author_id

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await answer_service.toggle_acceptance(answers[0].id, answerer_id)

        assert (await answer_repo.find_by_id(answers[0].id)).is_accepted is False
        assert (await question_repo.find_by_id(question.id)).is_answered is False
        assert (await user_repo.find_by_id(answerer_id)).reputation == 0

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        """Accepting an unknown answer raises NotFoundError."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await answer_service.toggle_acceptance(AnswerId(uuid4()), make_user().id)

    @pytest.mark.asyncio
    async def test_accepting_own_answer_is_awarded(self, unit_env):
        """An asker accepting their own answer still gets the award."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        user_repo = await unit_env.get(UserRepository)
        asker, question, _ = await _seed_thread(unit_env, answers=0)
        own = await answer_repo.save(make_answer(question.id, asker.id))

        # Act
        await answer_service.toggle_acceptance(own.id, asker.id)

        # Assert
        assert (await user_repo.find_by_id(asker.id)).reputation == 15


@pytest.mark.symmetric
class TestRevokeOnUnaccept:
    """Ledger with revoke_on_unaccept enabled."""

    @pytest.mark.asyncio
    async def test_unaccept_revokes_bonus_and_reopens_question(self, unit_env):
        """Withdrawing acceptance takes back the award and clears the selection."""
        # Arrange
        settings = ReputationSettings(revoke_on_unaccept=True)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_service = AnswerService(
            await unit_env.get(AnswerRepository),
            question_repo,
            await unit_env.get(CommentRepository),
            ReputationService(user_repo, settings),
            settings,
        )
        asker, question, answers = await _seed_thread(unit_env, answers=1)
        await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Act
        await answer_service.toggle_acceptance(answers[0].id, asker.id)

        # Assert
        assert (await user_repo.find_by_id(answers[0].author_id)).reputation == 0
        saved = await question_repo.find_by_id(question.id)
        assert saved.is_answered is False
        assert saved.selected_answer_id is None


class TestGetAnswersForQuestion:
    """Tests for get_answers_for_question."""

    @pytest.mark.asyncio
    async def test_accepted_first_then_votes(self, unit_env):
        """Answers come accepted first, then by vote count."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        asker, question, (accepted, plain) = await _seed_thread(unit_env)
        await answer_repo.save(accepted.model_copy(update={"is_accepted": True}))
        voted = await answer_repo.save(
            make_answer(question.id, asker.id, votes=votes_from(1, 1))
        )

        # Act
        answers = await answer_service.get_answers_for_question(question.id)

        # Assert
        assert [a.id for a in answers] == [accepted.id, voted.id, plain.id]


class TestDeleteAnswer:
    """Tests for delete_answer."""

    @pytest.mark.asyncio
    async def test_deleting_selected_answer_reopens_question(self, unit_env):
        """Deleting the accepted answer detaches it and clears the selection."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        asker, question, (first, second) = await _seed_thread(unit_env)
        await answer_service.toggle_acceptance(first.id, asker.id)
        await comment_repo.save(
            Comment(
                id=CommentId(uuid4()),
                answer_id=first.id,
                author_id=asker.id,
                body="Thanks!",
            )
        )
        author = await user_repo.find_by_id(first.author_id)

        # Act
        await answer_service.delete_answer(first.id, author)

        # Assert
        assert await answer_repo.find_by_id(first.id) is None
        assert await comment_repo.find_by_answer(first.id) == []
        saved = await question_repo.find_by_id(question.id)
        assert saved.answer_ids == [second.id]
        assert saved.is_answered is False
        assert saved.selected_answer_id is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Only the author or an admin may delete an answer."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, _, answers = await _seed_thread(unit_env, answers=1)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await answer_service.delete_answer(answers[0].id, make_user())

        assert await answer_repo.find_by_id(answers[0].id) is not None

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        """Admins may delete any answer."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        _, _, answers = await _seed_thread(unit_env, answers=1)

        # Act
        await answer_service.delete_answer(answers[0].id, make_user(is_admin=True))

        # Assert
        assert await answer_repo.find_by_id(answers[0].id) is None


class _LockRecorder:
    """Repository wrapper that logs which rows are read for update."""

    def __init__(self, inner, kind: str, log: list[str]) -> None:
        self._inner = inner
        self._kind = kind
        self._log = log

    async def find_by_id(self, entity_id, for_update: bool = False):
        if for_update:
            self._log.append(self._kind)
        return await self._inner.find_by_id(entity_id, for_update=for_update)

    def __getattr__(self, name):
        return getattr(self._inner, name)


class TestLockOrder:
    """Acceptance and deletion lock the question before the answer."""

    async def _recording_service(self, unit_env, log: list[str]) -> AnswerService:
        settings = ReputationSettings()
        return AnswerService(
            _LockRecorder(await unit_env.get(AnswerRepository), "answer", log),
            _LockRecorder(await unit_env.get(QuestionRepository), "question", log),
            await unit_env.get(CommentRepository),
            ReputationService(await unit_env.get(UserRepository), settings),
            settings,
        )

    @pytest.mark.asyncio
    async def test_accept_locks_question_first(self, unit_env):
        """Accepting takes the question lock, then the answer lock."""
        # Arrange
        log: list[str] = []
        answer_service = await self._recording_service(unit_env, log)
        asker, _, (answer, _) = await _seed_thread(unit_env)

        # Act
        await answer_service.toggle_acceptance(answer.id, asker.id)

        # Assert
        assert log == ["question", "answer"]

    @pytest.mark.asyncio
    async def test_delete_locks_question_first(self, unit_env):
        """Deleting takes the question lock, then the answer lock."""
        # Arrange
        log: list[str] = []
        answer_service = await self._recording_service(unit_env, log)
        user_repo = await unit_env.get(UserRepository)
        _, _, (answer, _) = await _seed_thread(unit_env)
        author = await user_repo.find_by_id(answer.author_id)

        # Act
        await answer_service.delete_answer(answer.id, author)

        # Assert
        assert log == ["question", "answer"]

    @pytest.mark.asyncio
    async def test_missing_answer_takes_no_locks(self, unit_env):
        """An unknown answer is rejected before any row is locked."""
        # Arrange
        log: list[str] = []
        answer_service = await self._recording_service(unit_env, log)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await answer_service.toggle_acceptance(
                AnswerId(uuid4()), make_user().id
            )
        assert log == []
