"""Base models for all domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from stackit.domain.error import ConflictError
from stackit.domain.value import EditRecord, SoftDeletion, UserId


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class ContentRecord(DomainModel):
    """Envelope shared by questions, answers and comments.

    Carries ownership, the edit history and the soft-delete marker. A record
    with a deletion marker is hidden from every read but kept for audit.
    """

    author_id: UserId
    is_edited: bool = False
    edit_history: list[EditRecord] = Field(default_factory=list)
    deletion: SoftDeletion | None = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_deleted(self) -> bool:
        """Whether the record has been soft-deleted."""
        return self.deletion is not None

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user authored this record."""
        return self.author_id == user_id

    def edited(
        self, editor_id: UserId, changes: dict[str, Any], reason: str | None = None
    ) -> Self:
        """Return a validated copy with the changes applied and recorded.

        Fields set to None in ``changes`` are left untouched. The previous
        values of the changed fields are appended to the edit history.

        Args:
            editor_id: User making the edit
            changes: New field values
            reason: Optional edit summary

        Returns:
            The edited record

        Raises:
            ConflictError: If no field actually changes
        """
        changed = {
            name: value
            for name, value in changes.items()
            if value is not None and getattr(self, name) != value
        }
        if not changed:
            raise ConflictError("No changes to update")

        now = datetime.now()
        entry = EditRecord(
            editor_id=editor_id,
            edited_at=now,
            previous_content=self.model_dump(mode="json", include=set(changed)),
            reason=reason,
        )
        return self.model_validate(
            {
                **dict(self),
                **changed,
                "is_edited": True,
                "edit_history": [*self.edit_history, entry],
                "updated_at": now,
            }
        )

    def soft_deleted(self, deleted_by: UserId, reason: str | None = None) -> Self:
        """Return a copy marked as deleted by the given user."""
        now = datetime.now()
        deletion = SoftDeletion(
            deleted_by=deleted_by,
            deleted_at=now,
            reason=reason or "No reason provided",
        )
        return self.model_copy(update={"deletion": deletion, "updated_at": now})
