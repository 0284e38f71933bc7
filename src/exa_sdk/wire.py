"""Mapping between in-memory dataclasses and the service's JSON shapes.

Requests are dumped generically: every dataclass field whose value is not
``None`` is emitted under its camelCase name (or the ``wire`` name given in the
field metadata). ``None`` means "unset" and never reaches the wire, while set
falsy values (``0``, ``False``, ``""``) do.

Responses are decoded by hand with the ``require_*``/``optional_*`` helpers
below. Each raises :class:`~exa_sdk.errors.DecodeError` naming the offending
field, so a malformed body fails as a whole instead of yielding partial data.
"""

from __future__ import annotations

from dataclasses import Field, fields, is_dataclass
from enum import Enum
from typing import Any

from exa_sdk.errors import DecodeError


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def wire_name(f: Field[Any]) -> str:
    return f.metadata.get("wire") or to_camel(f.name)


def dump(obj: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        payload[wire_name(f)] = _dump_value(value)
    return payload


def _dump_value(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return dump(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_dump_value(item) for item in value]
    return value


def _fail(where: str, expected: str) -> DecodeError:
    return DecodeError(
        code="decode_error",
        message=f"malformed response: {where} should be {expected}",
        details={"field": where},
    )


def expect_object(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise _fail(where, "an object")
    return value


def _lookup(data: dict[str, Any], name: str) -> Any:
    # camelCase is canonical; older payloads used snake_case for some keys
    camel = to_camel(name)
    if camel in data:
        return data[camel]
    return data.get(name)


def _where(where: str, name: str) -> str:
    return f"{where}.{to_camel(name)}" if where else to_camel(name)


def require_str(data: dict[str, Any], name: str, *, where: str = "") -> str:
    value = _lookup(data, name)
    if not isinstance(value, str):
        raise _fail(_where(where, name), "a string")
    return value


def optional_str(data: dict[str, Any], name: str, *, where: str = "") -> str | None:
    value = _lookup(data, name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _fail(_where(where, name), "a string or null")
    return value


def _as_float(value: Any) -> float | None:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def require_float(data: dict[str, Any], name: str, *, where: str = "") -> float:
    value = _as_float(_lookup(data, name))
    if value is None:
        raise _fail(_where(where, name), "a number")
    return value


def require_list(data: dict[str, Any], name: str, *, where: str = "") -> list[Any]:
    value = _lookup(data, name)
    if not isinstance(value, list):
        raise _fail(_where(where, name), "a list")
    return value


def optional_str_list(
    data: dict[str, Any], name: str, *, where: str = ""
) -> tuple[str, ...] | None:
    value = _lookup(data, name)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise _fail(_where(where, name), "a list of strings or null")
    return tuple(value)


def optional_float_list(
    data: dict[str, Any], name: str, *, where: str = ""
) -> tuple[float, ...] | None:
    value = _lookup(data, name)
    if value is None:
        return None
    if not isinstance(value, list):
        raise _fail(_where(where, name), "a list of numbers or null")
    numbers = [_as_float(item) for item in value]
    if any(n is None for n in numbers):
        raise _fail(_where(where, name), "a list of numbers or null")
    return tuple(n for n in numbers if n is not None)
