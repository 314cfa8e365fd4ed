"""Escape-sequence expansion for string and character literals."""

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


def apply_string_escapes(code: str) -> str:
    """Expand backslash escapes in the body of a string literal."""
    if "\\" not in code:
        return code
    chars = iter(code)
    out = []
    for ch in chars:
        if ch == "\\":
            following = next(chars, None)
            if following is None:
                raise ValueError("string literal ends with a backslash")
            ch = _ESCAPES.get(following, following)
        out.append(ch)
    return "".join(out)


def apply_char_escapes(code: str) -> str:
    """Decode a quoted character literal such as ``'a'`` or ``'\\n'``."""
    body = code[1:-1]
    if not body:
        raise ValueError(f"empty character literal: {code!r}")
    if body[0] != "\\":
        return body[0]
    escaped = body[1] if len(body) > 1 else None
    if escaped in _ESCAPES:
        return _ESCAPES[escaped]
    if escaped == "'":
        return "'"
    return "\\"