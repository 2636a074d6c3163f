from __future__ import annotations

from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel

from ..data.exceptions import NoSuchEntityError
from .errors import CATEGORY_INTERNAL, CATEGORY_NO_SUCH_ENTITY, GraphQLError, InputError, NotFoundError


def format_response(results: Sequence[BaseModel], path: Sequence[Union[str, int]] = ("items",)) -> Dict[str, Any]:
    """Split a resolver result list into GraphQL `data` and `errors`.

    Error markers keep their position in `data` as None, with a matching
    entry in `errors` pointing at that index.
    """
    data: List[Any] = []
    errors: List[Dict[str, Any]] = []
    for index, result in enumerate(results):
        if isinstance(result, (InputError, NotFoundError)):
            data.append(None)
            errors.append({
                "message": result.message,
                "path": [*path, index],
                "extensions": {"category": result.category},
            })
        else:
            data.append(result.model_dump(mode="json"))
    response: Dict[str, Any] = {"data": data}
    if errors:
        response["errors"] = errors
    return response


def format_failure(exc: Exception) -> Dict[str, Any]:
    """Whole-field failure payload for an exception raised by a resolver."""
    if isinstance(exc, GraphQLError):
        category = exc.category
    elif isinstance(exc, NoSuchEntityError):
        category = CATEGORY_NO_SUCH_ENTITY
    else:
        category = CATEGORY_INTERNAL
    return {
        "data": None,
        "errors": [{"message": str(exc), "extensions": {"category": category}}],
    }
