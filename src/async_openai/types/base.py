"""
Base models shared by request and response types.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from async_openai.types.builder import RequestArgs


def _wrap(value: Any) -> Any:
    if isinstance(value, dict):
        return ApiObject.model_validate(value)
    if isinstance(value, list):
        return [_wrap(v) for v in value]
    return value


class ApiObject(BaseModel):
    """Attribute-access view over a JSON object returned by the API.

    Every key of the response becomes an attribute; nested objects are
    wrapped recursively so that ``chunk.choices[0].delta.content`` works.
    Missing keys raise AttributeError; use :meth:`get` for optional ones.
    Keys that collide with pydantic model attributes (``json``, ``copy``,
    ``dict``, ...) resolve to the method, so read those with ``obj["json"]``
    or ``obj.get("json")``.

    Example:
        >>> obj = ApiObject.model_validate({"id": "file-1", "usage": {"total_tokens": 3}})
        >>> obj.usage.total_tokens
        3
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _wrap_nested(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: _wrap(value) for key, value in data.items()}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        """Return a key's value, or ``default`` when absent."""
        extra = self.__pydantic_extra__ or {}
        return extra.get(key, default)

    def __getitem__(self, key: str) -> Any:
        extra = self.__pydantic_extra__ or {}
        return extra[key]

    def __contains__(self, key: object) -> bool:
        return key in (self.__pydantic_extra__ or {})

    def keys(self) -> list[str]:
        return list(self.__pydantic_extra__ or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert back to plain JSON-compatible data."""
        return self.model_dump()


class RequestModel(BaseModel):
    """Base for JSON request bodies.

    Unknown keyword arguments are passed through to the API unchanged;
    unset (``None``) fields are left out of the payload.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @classmethod
    def args(cls) -> RequestArgs[Any]:
        """Start a fluent builder for this request."""
        return RequestArgs(cls)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent over the wire."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)
