"""Base models for domain entities."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from devforum.domain.model.vote import Vote, vote_count


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class VotableModel(DomainModel):
    """Entity carrying a vote set.

    Each user appears at most once in ``votes``.
    """

    votes: list[Vote] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_one_vote_per_user(self) -> "VotableModel":
        """Reject vote sets holding two entries for the same user."""
        voters = [vote.user_id for vote in self.votes]
        if len(voters) != len(set(voters)):
            raise ValueError("A user can hold at most one vote per item")
        return self

    @property
    def vote_count(self) -> int:
        """Sum of vote values."""
        return vote_count(self.votes)
