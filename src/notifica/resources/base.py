"""Shared plumbing for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, TypeAdapter

from notifica.client import validate_data

if TYPE_CHECKING:
    from notifica.client import NotificaClient

ModelT = TypeVar("ModelT", bound=BaseModel)

Body = Mapping[str, Any] | BaseModel


def to_body(params: Body | None) -> dict[str, Any] | None:
    """Serialize request params, dropping unset (None) fields."""
    if params is None:
        return None
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", exclude_none=True)
    return {key: value for key, value in params.items() if value is not None}


def unwrap(response: Any, item_type: type[ModelT]) -> ModelT:
    """Validate the ``data`` member of a ``{data: T}`` envelope."""
    return validate_data(response, TypeAdapter(item_type))


def unwrap_list(response: Any, item_type: type[ModelT]) -> list[ModelT]:
    """Validate the ``data`` member of a ``{data: [T, ...]}`` envelope."""
    return validate_data(response, TypeAdapter(list[item_type]))  # type: ignore[valid-type]


class Resource:
    """Base class for API resources bound to a shared client."""

    def __init__(self, client: NotificaClient) -> None:
        self._client = client
