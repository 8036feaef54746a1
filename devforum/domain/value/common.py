"""Shared bases for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, such as a tag or a username.

    Validators on subclasses normalize and check ``root``. Serializing a
    model that holds one yields the bare primitive, so API responses and
    database rows never see the wrapper.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
