"""Parser errors and their rendering against a source file."""

from __future__ import annotations

from typing import Any, Sequence

from .span import FileInfo


def fmt_expected(expected: Sequence[str]) -> str:
    """Render the list of tokens the parser would have accepted."""
    if not expected:
        return ""
    parts = []
    last = len(expected) - 1
    for i, item in enumerate(expected):
        if i == 0:
            sep = "Expected one of"
        elif i < last:
            sep = ","
        else:
            sep = " or"
        parts.append(f"{sep} {item}")
    return "; " + "".join(parts)


class ParseError(Exception):
    """A failure reported by the parser."""

    def render(self, file_info: FileInfo) -> str:
        raise NotImplementedError


class UserError(ParseError):
    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def render(self, file_info: FileInfo) -> str:
        return str(self.error)


class InvalidToken(ParseError):
    def __init__(self, location: int) -> None:
        super().__init__(location)
        self.location = location

    def render(self, file_info: FileInfo) -> str:
        return (
            f"Invalid token at {file_info.display_path()}:"
            f"{file_info.trans_span2(self.location)}"
        )


class UnrecognizedEof(ParseError):
    def __init__(self, location: int, expected: Sequence[str]) -> None:
        super().__init__(location, list(expected))
        self.location = location
        self.expected = list(expected)

    def render(self, file_info: FileInfo) -> str:
        return (
            f"Unrecognized EOF found at {file_info.display_path()}:"
            f"{file_info.trans_span2(self.location)}{fmt_expected(self.expected)}"
        )


class UnrecognizedToken(ParseError):
    def __init__(self, token: tuple[int, Any, int], expected: Sequence[str]) -> None:
        super().__init__(token, list(expected))
        self.token = token
        self.expected = list(expected)

    def render(self, file_info: FileInfo) -> str:
        start, tok, end = self.token
        return (
            f"Unrecognized token `{tok}` found at {file_info.display_path()}:"
            f"{file_info.trans_span2(start)} - {file_info.trans_span2(end)}"
            f"{fmt_expected(self.expected)}"
        )


class ExtraToken(ParseError):
    def __init__(self, token: tuple[int, Any, int]) -> None:
        super().__init__(token)
        self.token = token

    def render(self, file_info: FileInfo) -> str:
        start, tok, end = self.token
        return (
            f"Extra token `{tok}` found at {file_info.display_path()}:"
            f"{file_info.trans_span2(start)} - {file_info.trans_span2(end)}"
        )