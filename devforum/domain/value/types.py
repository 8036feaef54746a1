"""Domain value objects for DevForum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from devforum.domain.error import InvalidVoteValueError
from devforum.domain.value.common import RootValueObject


class VoteValue(IntEnum):
    """Direction of a vote. Persisted as the integer 1 or -1."""

    UP = 1
    DOWN = -1

    @classmethod
    def parse(cls, value: object) -> "VoteValue":
        """Convert a raw request value into a vote direction.

        JSON numbers carry no integer/float distinction, so 1.0 and -1.0
        count as votes. Booleans are rejected even though they compare
        equal to 1.

        Raises:
            InvalidVoteValueError: If value is not numerically 1 or -1
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidVoteValueError(value)
        if value == cls.UP:
            return cls.UP
        if value == cls.DOWN:
            return cls.DOWN
        raise InvalidVoteValueError(value)


class VoteAction(str, Enum):
    """What a vote request did to the voter's entry in a vote set."""

    CAST = "cast"  # No previous vote, a new one was inserted
    CHANGED = "changed"  # Previous vote had the opposite direction
    REMOVED = "removed"  # Previous vote had the same direction, so it was withdrawn


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Tag attached to a question.

    Tags are normalized to lowercase with surrounding whitespace removed,
    1-30 characters without inner whitespace.
    Examples: 'python', 'react', 'node.js', 'c++'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_tag_name(cls, v: object) -> object:
        """Lowercase and trim the raw tag."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not 1 <= len(v) <= 30:
            raise ValueError("Tag must be 1-30 characters")
        if re.search(r"\s", v):
            raise ValueError("Tag must not contain whitespace")
        return v


class CommunityName(RootValueObject[str]):
    """Unique community name, shared with the tag it groups.

    Must be lowercase letters and digits only, 2-30 characters.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_community_name(cls, v: object) -> object:
        """Lowercase and trim the raw name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_community_name(cls, v: str) -> str:
        """Validate community name format."""
        if not re.match(r"^[a-z0-9]{2,30}$", v):
            raise ValueError(
                "Community name must be 2-30 characters, lowercase letters and numbers only"
            )
        return v

    @property
    def default_display_name(self) -> str:
        """Display name used when no community record exists."""
        return self.root[:1].upper() + self.root[1:]


class Username(RootValueObject[str]):
    """Unique public user name.

    Letters, digits, underscores and hyphens, 3-30 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters: letters, numbers, '_' or '-'"
            )
        return v
