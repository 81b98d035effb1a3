"""Todo data model."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    field_serializer,
)

COMPLETE_MARK = "✅"
INCOMPLETE_MARK = "❌"


class Todo(BaseModel):
    """A single task in the todo list.

    Every field is required and read by its stored name only, so a record
    missing ``id`` or ``isCompleted`` fails validation instead of being
    filled in. Use ``Todo.create`` for new todos.

    Attributes:
        id: Unique identifier, assigned at creation
        title: Display text (empty strings are accepted)
        is_completed: Completion flag, stored as ``isCompleted``
    """

    model_config = ConfigDict(validate_by_name=False, validate_by_alias=True)

    id: UUID
    title: StrictStr
    is_completed: StrictBool = Field(alias="isCompleted")

    @classmethod
    def create(cls, title: str, is_completed: bool = False) -> Todo:
        """Build a new todo with a fresh id."""
        return cls(id=uuid4(), title=title, isCompleted=is_completed)

    @field_serializer("id")
    def _serialize_id(self, value: UUID) -> str:
        # Upper-case ids, matching files written by earlier releases.
        return str(value).upper()

    def __str__(self) -> str:
        mark = COMPLETE_MARK if self.is_completed else INCOMPLETE_MARK
        return f"{self.title} - {mark}"


# Adapter for the persisted snapshot: a JSON array of todos.
TodoList = TypeAdapter(list[Todo])
