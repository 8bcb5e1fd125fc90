"""Immutable base model shared by the parameter records."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A frozen, strictly validated record that serializes with camelCase keys.

    `tree_height` dumps as `treeHeight` under `by_alias=True`, while
    construction still takes the snake_case field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:
        """Build a validated variant of this record with some fields replaced."""
        return self.__class__(**(self.model_dump() | kwargs))
