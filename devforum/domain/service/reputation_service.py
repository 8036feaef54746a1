"""Reputation domain service."""

import logfire

from devforum.config import ReputationSettings
from devforum.domain.model import VoteOutcome
from devforum.domain.repository import UserRepository
from devforum.domain.value import UserId, VoteAction, VoteValue

from .base import Service


class ReputationService(Service):
    """Domain service applying the reputation ledger rules.

    Reputation only moves when someone acts on another user's content.
    Every change is clamped so a user's reputation never goes below zero.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        reputation_settings: ReputationSettings,
    ) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
            reputation_settings: Award and penalty amounts
        """
        self.user_repository = user_repository
        self.settings = reputation_settings

    def award_for(self, value: VoteValue) -> int:
        """Reputation change for an author receiving a vote."""
        if value == VoteValue.UP:
            return self.settings.upvote_award
        return self.settings.downvote_penalty

    def vote_delta(self, outcome: VoteOutcome) -> int:
        """Reputation change an author receives from a vote outcome.

        A cast or changed vote applies the award for the requested direction.
        A changed vote does not take back the award of the vote it replaced.
        A removed vote applies nothing unless reverse_on_unvote is enabled,
        in which case the award of the withdrawn vote is reversed.

        Args:
            outcome: Result of applying the vote to the vote set

        Returns:
            Signed reputation change (before clamping)
        """
        if outcome.action in (VoteAction.CAST, VoteAction.CHANGED):
            return self.award_for(outcome.value)
        if self.settings.reverse_on_unvote:
            return -self.award_for(outcome.value)
        return 0

    async def apply_vote(
        self, author_id: UserId, voter_id: UserId, outcome: VoteOutcome
    ) -> int:
        """Propagate a vote outcome to the content author's reputation.

        Args:
            author_id: Author of the voted content
            voter_id: User who voted
            outcome: Result of applying the vote

        Returns:
            The signed delta that was requested (0 for self-votes)
        """
        with logfire.span(
            "reputation_service.apply_vote",
            author_id=str(author_id),
            voter_id=str(voter_id),
            action=outcome.action.value,
        ):
            if author_id == voter_id:
                logfire.info(
                    "Self-vote leaves reputation unchanged", user_id=str(author_id)
                )
                return 0

            delta = self.vote_delta(outcome)
            if delta == 0:
                return 0

            reputation = await self.user_repository.adjust_reputation(author_id, delta)
            if reputation is None:
                logfire.warn(
                    "Reputation change for missing author", author_id=str(author_id)
                )
                return delta

            logfire.info(
                "Reputation adjusted",
                user_id=str(author_id),
                delta=delta,
                reputation=reputation,
            )
            return delta

    async def award_acceptance(self, author_id: UserId) -> None:
        """Credit the accept award to an answer's author."""
        await self._adjust(author_id, self.settings.accept_award, "acceptance")

    async def revoke_acceptance(self, author_id: UserId) -> None:
        """Take back the accept award from an answer's author."""
        await self._adjust(author_id, -self.settings.accept_award, "unacceptance")

    async def _adjust(self, user_id: UserId, delta: int, reason: str) -> None:
        with logfire.span(
            "reputation_service.adjust", user_id=str(user_id), delta=delta, reason=reason
        ):
            reputation = await self.user_repository.adjust_reputation(user_id, delta)
            if reputation is None:
                logfire.warn("Reputation change for missing user", user_id=str(user_id))
                return
            logfire.info(
                "Reputation adjusted",
                user_id=str(user_id),
                delta=delta,
                reputation=reputation,
                reason=reason,
            )
