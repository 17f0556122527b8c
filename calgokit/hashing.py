"""Hash functions producing unsigned 32-bit keys."""

from __future__ import annotations

__all__ = ["int_hash", "pointer_hash", "string_hash", "string_nocase_hash"]

_MASK = 0xFFFFFFFF
_DJB2_SEED = 5381


def int_hash(value: int) -> int:
    """Hash an integer by reinterpreting it as an unsigned 32-bit value."""
    return value & _MASK


def pointer_hash(obj: object) -> int:
    """Hash an object by its identity; the object's value is not used."""
    return id(obj) & _MASK


def _as_bytes(string: str | bytes) -> bytes:
    if isinstance(string, str):
        return string.encode("utf-8")
    return bytes(string)


def _djb2(data: bytes) -> int:
    result = _DJB2_SEED
    for byte in data:
        result = ((result << 5) + result + byte) & _MASK
    return result


def string_hash(string: str | bytes) -> int:
    """Hash a string with the djb2 function (text is hashed as UTF-8)."""
    return _djb2(_as_bytes(string))


def string_nocase_hash(string: str | bytes) -> int:
    """Hash a string with djb2, ignoring the case of ASCII letters."""
    data = _as_bytes(string)
    return _djb2(data.lower())