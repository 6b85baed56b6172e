"""Byte escaping for double-quoted string literals."""

from __future__ import annotations

_NAMED_ESCAPES: dict[int, str] = {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x22: '\\"',
    0x27: "\\'",
    0x5C: "\\\\",
}
_NAMED_UNESCAPES: dict[str, int] = {escape[1]: byte for byte, escape in _NAMED_ESCAPES.items()}
_OCTAL_DIGITS = "01234567"


class LiteralEscapeError(ValueError):
    """Raised when an escaped literal cannot be decoded back to bytes."""


def escape_literal_bytes(data: bytes) -> str:
    """Escape raw bytes into the body of a double-quoted literal.

    Quotes, backslash and tab/newline/carriage return use their two-character
    escapes; every other byte outside printable ASCII becomes a three-digit
    octal escape, which both C-family and Java literal grammars accept.
    """
    return "".join(_escape_byte(byte) for byte in data)


def unescape_literal(text: str) -> bytes:
    """Decode a literal body produced by `escape_literal_bytes` back to the original bytes."""
    decoded = bytearray()
    index = 0
    while index < len(text):
        character = text[index]
        if character != "\\":
            if ord(character) > 0x7F:
                raise LiteralEscapeError(f"Non-ASCII character at offset {index}: {character!r}")
            decoded.append(ord(character))
            index += 1
            continue

        if index + 1 >= len(text):
            raise LiteralEscapeError("Literal ends with a dangling backslash.")
        marker = text[index + 1]
        if marker in _NAMED_UNESCAPES:
            decoded.append(_NAMED_UNESCAPES[marker])
            index += 2
            continue
        if marker in _OCTAL_DIGITS:
            end = index + 1
            while end < len(text) and end < index + 4 and text[end] in _OCTAL_DIGITS:
                end += 1
            value = int(text[index + 1 : end], 8)
            if value > 0xFF:
                raise LiteralEscapeError(f"Octal escape out of byte range at offset {index}.")
            decoded.append(value)
            index = end
            continue
        raise LiteralEscapeError(f"Unsupported escape sequence '\\{marker}' at offset {index}.")
    return bytes(decoded)


def _escape_byte(byte: int) -> str:
    named = _NAMED_ESCAPES.get(byte)
    if named is not None:
        return named
    if 0x20 <= byte < 0x7F:
        return chr(byte)
    return f"\\{byte:03o}"
