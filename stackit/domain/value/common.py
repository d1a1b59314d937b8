"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable group of values compared by equality.

    Used for the pieces embedded in content records: edit history entries,
    soft deletions, bounties and vote tallies.
    """

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Validated wrapper around a single primitive.

    ``model_dump()`` returns the primitive, so ``Username``, ``EmailAddress``
    and ``TagName`` serialize as plain strings. Use ``.root`` to unwrap.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
