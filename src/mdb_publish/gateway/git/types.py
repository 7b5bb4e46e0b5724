"""Discriminated union types for git tag operations.

TagCreated | TagCreateFailed follows the NonIdealState pattern: a failure is
returned to the caller, which decides whether it is fatal.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagCreated:
    """Success result from creating a tag."""

    tag_name: str


@dataclass(frozen=True)
class TagCreateFailed:
    """Error result from creating a tag. Implements NonIdealState."""

    tag_name: str
    message: str

    @property
    def error_type(self) -> str:
        return "tag-create-failed"
