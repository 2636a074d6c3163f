"""
Resolver errors.

Two families live here:
- exceptions, raised when the whole field resolution has to fail;
- inline markers, appended to the result list in place of a record so the
  rest of the list is still returned.
"""
from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..data.exceptions import PRODUCT_NOT_FOUND_MESSAGE

CATEGORY_INPUT = "graphql-input"
CATEGORY_NO_SUCH_ENTITY = "graphql-no-such-entity"
CATEGORY_INTERNAL = "internal"


class GraphQLError(Exception):
    """Base class for errors surfaced as a query failure."""
    category: ClassVar[str] = CATEGORY_INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(GraphQLError):
    """The resolver was invoked without the data it needs from its parent."""


# ---- Inline markers ----

class InputError(BaseModel):
    """Cart-level error reported at the head of the item list."""
    model_config = ConfigDict(frozen=True)
    category: ClassVar[str] = CATEGORY_INPUT

    kind: Literal["input"] = "input"
    message: str = Field(description="Display message")


class NotFoundError(BaseModel):
    """A cart item whose product could not be matched."""
    model_config = ConfigDict(frozen=True)
    category: ClassVar[str] = CATEGORY_NO_SUCH_ENTITY

    kind: Literal["not_found"] = "not_found"
    message: str = Field(default=PRODUCT_NOT_FOUND_MESSAGE, description="Display message")


ErrorMarker = Annotated[Union[InputError, NotFoundError], Field(discriminator="kind")]
