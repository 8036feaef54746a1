"""Domain layer DI providers."""

from dishka import Scope, provide

from devforum.config import AuthSettings, RankingSettings, ReputationSettings
from devforum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    CommunityRepository,
    QuestionRepository,
    UserRepository,
)
from devforum.domain.service import (
    AnswerService,
    CommentService,
    CommunityService,
    JWTService,
    QuestionService,
    ReputationService,
    TagService,
    UserService,
    VoteService,
)
from devforum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_reputation_service(
        self,
        user_repository: UserRepository,
        reputation_settings: ReputationSettings,
    ) -> ReputationService:
        """Provide reputation ledger service."""
        return ReputationService(
            user_repository=user_repository, reputation_settings=reputation_settings
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        reputation_service: ReputationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            reputation_service=reputation_service,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        community_repository: CommunityRepository,
        ranking_settings: RankingSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
            community_repository=community_repository,
            ranking_settings=ranking_settings,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        comment_repository: CommentRepository,
        reputation_service: ReputationService,
        reputation_settings: ReputationSettings,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            comment_repository=comment_repository,
            reputation_service=reputation_service,
            reputation_settings=reputation_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        answer_repository: AnswerRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, answer_repository=answer_repository
        )

    @provide
    def get_community_service(
        self,
        community_repository: CommunityRepository,
        question_repository: QuestionRepository,
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(
            community_repository=community_repository,
            question_repository=question_repository,
        )

    @provide
    def get_tag_service(self, question_repository: QuestionRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(question_repository=question_repository)
