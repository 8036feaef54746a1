"""Tag domain service."""

import logfire

from devforum.domain.repository import QuestionRepository
from devforum.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag usage statistics.

    Tags have no records of their own; they exist through the questions
    that carry them.
    """

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize tag service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def popular_tags(self, limit: int = 20) -> list[tuple[TagName, int]]:
        """Most used tags with their question counts.

        Args:
            limit: Maximum number of tags to return

        Returns:
            (tag, count) pairs, most used first
        """
        with logfire.span("tag_service.popular_tags", limit=limit):
            tags = await self.question_repository.tag_counts(limit=limit)
            logfire.info("Popular tags computed", count=len(tags))
            return tags
