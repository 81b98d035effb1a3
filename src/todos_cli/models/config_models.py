"""Configuration models for Todos CLI."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

StorageType = Literal["file", "memory"]


class AppConfig(BaseModel):
    """Application configuration.

    Attributes:
        storage: Which persistence strategy to use. ``file`` keeps todos in
            ``todos.json`` in the working directory, ``memory`` keeps them
            for the current session only.
    """

    storage: StorageType = Field(default="file")
