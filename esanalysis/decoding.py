"""Shared helpers for decoding loosely typed settings values.

Search engines frequently echo numeric and boolean settings back as
strings (``"max_shingle_size": "3"``, ``"output_unigrams": "false"``).
The ``stringly_*`` helpers accept either form and normalize to the native
type using msgspec's lax conversion mode.
"""

from typing import Any

import msgspec

from .exceptions import MissingFieldError, TypeMismatchError


def child_path(path: str, key: str | int) -> str:
    """Extend a JSON path with an object key or array index."""
    if isinstance(key, int):
        return f"{path}[{key}]"
    return f"{path}.{key}"


def expect_object(data: Any, path: str) -> dict[str, Any]:
    """Return data unchanged if it is a JSON object."""
    if not isinstance(data, dict):
        raise TypeMismatchError("object", data, path)
    return data


def expect_list(data: Any, path: str) -> list[Any]:
    """Return data unchanged if it is a JSON array."""
    if not isinstance(data, list | tuple):
        raise TypeMismatchError("array", data, path)
    return list(data)


def expect_str(data: Any, path: str) -> str:
    """Return data unchanged if it is a JSON string."""
    if not isinstance(data, str):
        raise TypeMismatchError("string", data, path)
    return data


def require(obj: dict[str, Any], key: str, path: str) -> Any:
    """Fetch a required key, treating ``null`` as absent."""
    value = obj.get(key)
    if value is None:
        raise MissingFieldError(key, path)
    return value


def stringly_int(value: Any, path: str) -> int:
    """Decode an integer sent either as a JSON number or a numeric string.

    Args:
        value: Raw JSON value
        path: Location of the value, used in errors

    Returns:
        The integer value

    Raises:
        TypeMismatchError: If the value cannot be read as an integer
    """
    # bool is an int subclass; lax mode would otherwise let it through
    if isinstance(value, bool):
        raise TypeMismatchError("integer", value, path)
    if isinstance(value, str):
        value = value.strip()
    try:
        return msgspec.convert(value, int, strict=False)
    except msgspec.ValidationError as e:
        raise TypeMismatchError("integer", value, path) from e


def stringly_bool(value: Any, path: str) -> bool:
    """Decode a boolean sent either as a JSON boolean or ``"true"``/``"false"``.

    Raises:
        TypeMismatchError: If the value cannot be read as a boolean
    """
    if not isinstance(value, bool | str):
        raise TypeMismatchError("boolean", value, path)
    # lax mode would also take "1", "0" and other casings
    if isinstance(value, str) and value not in ("true", "false"):
        raise TypeMismatchError("boolean", value, path)
    try:
        return msgspec.convert(value, bool, strict=False)
    except msgspec.ValidationError as e:
        raise TypeMismatchError("boolean", value, path) from e


def optional_int(obj: dict[str, Any], key: str, default: int, path: str) -> int:
    """Read an optional lenient integer, falling back to a default."""
    value = obj.get(key)
    if value is None:
        return default
    return stringly_int(value, child_path(path, key))


def optional_bool(obj: dict[str, Any], key: str, default: bool, path: str) -> bool:
    """Read an optional lenient boolean, falling back to a default."""
    value = obj.get(key)
    if value is None:
        return default
    return stringly_bool(value, child_path(path, key))


def optional_str(obj: dict[str, Any], key: str, default: str, path: str) -> str:
    """Read an optional string, falling back to a default."""
    value = obj.get(key)
    if value is None:
        return default
    return expect_str(value, child_path(path, key))
