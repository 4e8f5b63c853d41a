"""
D-Bus type signature codec.

A variant carries its payload type as a signature string such as ``d``, ``as``
or ``a{sv}``. Decoding a property bag needs to know whether such a tag names
exactly one complete type before the payload can be consumed or skipped.
"""
from __future__ import annotations

# Single-character codes that are complete types on their own.
BASIC_TYPES: frozenset[str] = frozenset("ybnqiuxtdhsog")

# Human-readable names for the single-character type codes.
TYPE_NAMES: dict[str, str] = {
    "y": "byte",
    "b": "boolean",
    "n": "int16",
    "q": "uint16",
    "i": "int32",
    "u": "uint32",
    "x": "int64",
    "t": "uint64",
    "d": "double",
    "h": "unix_fd",
    "s": "string",
    "o": "object_path",
    "g": "signature",
    "v": "variant",
    "a": "array",
    "(": "struct",
    "{": "dict_entry",
}

MAX_SIGNATURE_LENGTH = 255
MAX_NESTING_DEPTH = 32


def complete_type_end(signature: str, start: int = 0) -> int:
    """
    Find where the complete type beginning at ``start`` ends.

    Args:
        signature: A D-Bus signature string.
        start: Index of the first character of the type.

    Returns:
        The index one past the last character of the complete type.

    Raises:
        ValueError: If no well-formed complete type starts at ``start``.
    """
    if len(signature) > MAX_SIGNATURE_LENGTH:
        raise ValueError(f"signature longer than {MAX_SIGNATURE_LENGTH} characters")
    return _scan(signature, start, array_depth=0, struct_depth=0, in_array=False)


def _scan(signature: str, i: int, array_depth: int, struct_depth: int, in_array: bool) -> int:
    if i >= len(signature):
        raise ValueError(f"truncated signature {signature!r}")
    code = signature[i]

    if code in BASIC_TYPES or code == "v":
        return i + 1

    if code == "a":
        if array_depth + 1 > MAX_NESTING_DEPTH:
            raise ValueError("array nesting too deep")
        return _scan(signature, i + 1, array_depth + 1, struct_depth, in_array=True)

    if code == "(":
        if struct_depth + 1 > MAX_NESTING_DEPTH:
            raise ValueError("struct nesting too deep")
        i += 1
        if i < len(signature) and signature[i] == ")":
            raise ValueError("empty struct in signature")
        while i < len(signature) and signature[i] != ")":
            i = _scan(signature, i, array_depth, struct_depth + 1, in_array=False)
        if i >= len(signature):
            raise ValueError(f"unterminated struct in {signature!r}")
        return i + 1

    if code == "{":
        # Dict entries only appear as array elements, keyed by a basic type.
        if not in_array:
            raise ValueError("dict entry outside of an array")
        if struct_depth + 1 > MAX_NESTING_DEPTH:
            raise ValueError("dict entry nesting too deep")
        i += 1
        if i >= len(signature) or signature[i] not in BASIC_TYPES:
            raise ValueError("dict entry key must be a basic type")
        i = _scan(signature, i + 1, array_depth, struct_depth + 1, in_array=False)
        if i >= len(signature) or signature[i] != "}":
            raise ValueError(f"dict entry must hold exactly two types in {signature!r}")
        return i + 1

    raise ValueError(f"unknown type code {code!r} in {signature!r}")


def is_single_complete_type(signature: str) -> bool:
    if not signature:
        return False
    try:
        return complete_type_end(signature) == len(signature)
    except ValueError:
        return False


def type_name(signature: str) -> str:
    """
    Name the outermost type of a signature, e.g. ``"double"`` for ``d``.

    Unknown codes are returned unchanged.
    """
    if not signature:
        return "empty"
    return TYPE_NAMES.get(signature[0], signature)
