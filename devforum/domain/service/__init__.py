"""Domain services."""

from .answer_service import AcceptanceResult, AnswerService
from .base import Service
from .comment_service import CommentService
from .community_service import CommunityService
from .jwt_service import JWTService
from .question_service import QuestionService
from .reputation_service import ReputationService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AcceptanceResult",
    "AnswerService",
    "CommentService",
    "CommunityService",
    "JWTService",
    "QuestionService",
    "ReputationService",
    "Service",
    "TagService",
    "UserService",
    "VoteResult",
    "VoteService",
]
