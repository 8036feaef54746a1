"""Application layer DI providers."""

from dishka import Scope, provide

from devforum.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
)
from devforum.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from devforum.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from devforum.application.usecase.community import (
    ChangeMembershipUseCase,
    CreateCommunityUseCase,
    GetCommunityUseCase,
    ListCommunitiesUseCase,
    PopularCommunitiesUseCase,
    UpdateCommunityUseCase,
)
from devforum.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from devforum.application.usecase.tag import PopularTagsUseCase
from devforum.application.usecase.user import (
    GetProfileUseCase,
    ListUserAnswersUseCase,
    ListUserQuestionsUseCase,
    UpdateProfileUseCase,
)
from devforum.application.usecase.vote import VoteUseCase
from devforum.domain.repository import UserRepository
from devforum.domain.service import (
    AnswerService,
    CommentService,
    CommunityService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from devforum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide
    def get_list_questions_use_case(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, user_repository=user_repository
        )

    @provide
    def get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_repository: UserRepository,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            user_repository=user_repository,
        )

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_accept_answer_use_case(
        self, answer_service: AnswerService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(answer_service=answer_service)

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    # Vote use cases
    @provide
    def get_vote_use_case(self, vote_service: VoteService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService, user_repository: UserRepository
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_repository=user_repository
        )

    # Community use cases
    @provide
    def get_list_communities_use_case(
        self, community_service: CommunityService
    ) -> ListCommunitiesUseCase:
        """Provide list communities use case."""
        return ListCommunitiesUseCase(community_service=community_service)

    @provide
    def get_popular_communities_use_case(
        self, community_service: CommunityService
    ) -> PopularCommunitiesUseCase:
        """Provide popular communities use case."""
        return PopularCommunitiesUseCase(community_service=community_service)

    @provide
    def get_community_use_case(
        self,
        community_service: CommunityService,
        question_service: QuestionService,
        user_repository: UserRepository,
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(
            community_service=community_service,
            question_service=question_service,
            user_repository=user_repository,
        )

    @provide
    def get_create_community_use_case(
        self, community_service: CommunityService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(community_service=community_service)

    @provide
    def get_update_community_use_case(
        self, community_service: CommunityService
    ) -> UpdateCommunityUseCase:
        """Provide update community use case."""
        return UpdateCommunityUseCase(community_service=community_service)

    @provide
    def get_membership_use_case(
        self, community_service: CommunityService
    ) -> ChangeMembershipUseCase:
        """Provide join/leave community use case."""
        return ChangeMembershipUseCase(community_service=community_service)

    # Tag use cases
    @provide
    def get_popular_tags_use_case(self, tag_service: TagService) -> PopularTagsUseCase:
        """Provide popular tags use case."""
        return PopularTagsUseCase(tag_service=tag_service)

    # User use cases
    @provide
    def get_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetProfileUseCase:
        """Provide get user profile use case."""
        return GetProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide
    def get_user_questions_use_case(
        self, user_service: UserService, question_service: QuestionService
    ) -> ListUserQuestionsUseCase:
        """Provide list user questions use case."""
        return ListUserQuestionsUseCase(
            user_service=user_service, question_service=question_service
        )

    @provide
    def get_user_answers_use_case(
        self, user_service: UserService, answer_service: AnswerService
    ) -> ListUserAnswersUseCase:
        """Provide list user answers use case."""
        return ListUserAnswersUseCase(
            user_service=user_service, answer_service=answer_service
        )
