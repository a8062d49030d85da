"""
Fluent builders for request models.

Every request model has a companion builder reachable through ``.args()``:
each field becomes a chainable setter and ``build()`` validates the result.

Example:
    >>> request = (
    ...     CreateCompletionRequest.args()
    ...     .model("gpt-3.5-turbo-instruct")
    ...     .prompt("Tell me the recipe of alfredo pasta")
    ...     .max_tokens(40)
    ...     .build()
    ... )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from async_openai.errors import InvalidArgumentError

M = TypeVar("M", bound=BaseModel)


def _first_error_location(error: ValidationError) -> str | None:
    errors = error.errors()
    if not errors:
        return None
    loc = errors[0].get("loc") or ()
    return ".".join(str(part) for part in loc) or None


def validation_failure(model_cls: type[BaseModel], error: ValidationError) -> InvalidArgumentError:
    """Translate a pydantic ValidationError into InvalidArgumentError."""
    details = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in error.errors()
    )
    return InvalidArgumentError(
        f"Invalid {model_cls.__name__}: {details}",
        field=_first_error_location(error),
    )


def coerce_request(model_cls: type[M], value: M | Mapping[str, Any]) -> M:
    """Accept a request model instance or a plain mapping of its fields.

    Raises:
        InvalidArgumentError: If the mapping does not validate
    """
    if isinstance(value, model_cls):
        return value
    if isinstance(value, Mapping):
        try:
            return model_cls.model_validate(dict(value))
        except ValidationError as e:
            raise validation_failure(model_cls, e) from e
    raise InvalidArgumentError(
        f"Expected {model_cls.__name__} or a mapping, got {type(value).__name__}",
        actual=value,
    )


class RequestArgs(Generic[M]):
    """Chainable builder for a request model."""

    def __init__(self, model_cls: type[M]) -> None:
        self._model_cls = model_cls
        self._fields: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], RequestArgs[M]]:
        if name.startswith("_"):
            raise AttributeError(name)

        def setter(value: Any) -> RequestArgs[M]:
            self._fields[name] = value
            return self

        return setter

    def set(self, **fields: Any) -> RequestArgs[M]:
        """Set several fields at once."""
        self._fields.update(fields)
        return self

    def build(self) -> M:
        """Validate and construct the request.

        Raises:
            InvalidArgumentError: If a required field is missing or a value
                has the wrong shape
        """
        try:
            return self._model_cls(**self._fields)
        except ValidationError as e:
            raise validation_failure(self._model_cls, e) from e

    def __repr__(self) -> str:
        return f"RequestArgs({self._model_cls.__name__}, {self._fields!r})"
