"""Tokenizer for the surface language."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple


class TokKind(enum.Enum):
    """Token kinds; the value is the token's display name."""

    UPPER_IDENT = "UpperIdentifier"
    LOWER_IDENT = "LowerIdentifier"
    PUBLIC = "pub"
    EXTERN = "extern"
    WHERE = "where"
    END = "end"
    MODULE = "module"
    USE = "use"
    DATA = "data"
    CODATA = "codata"
    ALIAS = "alias"
    DEFINE = "define"
    MAIN = "main"
    LET = "let"
    IN = "in"
    DO = "do"
    RET = "ret"
    FN = "fn"
    PI = "pi"
    REC = "rec"
    MATCH = "match"
    COMATCH = "comatch"
    FORALL = "Forall"
    EXISTS = "Exists"
    AT = "@"
    PACK = "pack"
    NUM_LIT = "NumLiteral"
    STR_LIT = "StrLiteral"
    CHAR_LIT = "CharLiteral"
    PAREN_OPEN = "("
    PAREN_CLOSE = ")"
    BRACKET_OPEN = "["
    BRACKET_CLOSE = "]"
    BRACE_OPEN = "{"
    BRACE_CLOSE = "}"
    COMMA = ","
    COLON = ":"
    COLON_COLON = "::"
    EQUALS = "="
    SEMICOLON = ";"
    FORCE = "!"
    SLASH = "/"
    BRANCH = "|"
    PLUS = "+"
    DOT = "."
    DOT_DOT = ".."
    ARROW = "->"
    ASSIGN = "<-"
    HOLE = "_"

    @property
    def has_payload(self) -> bool:
        return self in _PAYLOAD_KINDS


_PAYLOAD_KINDS = frozenset(
    {
        TokKind.UPPER_IDENT,
        TokKind.LOWER_IDENT,
        TokKind.NUM_LIT,
        TokKind.STR_LIT,
        TokKind.CHAR_LIT,
    }
)


@dataclass(frozen=True)
class Tok:
    """A token; identifiers and literals carry their source text."""

    kind: TokKind
    value: str | None = None

    def __str__(self) -> str:
        if self.kind.has_payload:
            return f"{self.kind.value}({self.value})"
        return self.kind.value


class _Rule(NamedTuple):
    pattern: re.Pattern[str]
    kind: TokKind | None
    priority: int


_IDENT_TAIL = r"(?:[a-zA-Z0-9_]|'|\?|\+|\*|-|=|~)*"

_REGEX_RULES: list[tuple[str, TokKind | None]] = [
    (r"/\*(?:[^*]|\*[^/])*\*/", None),
    (r"//.*\n", None),
    (r"#.*\n", None),
    (r"[ \t\n\f]+", None),
    (r"[A-Z]" + _IDENT_TAIL, TokKind.UPPER_IDENT),
    (r"(?:[a-z]|\?|\*|=)" + _IDENT_TAIL, TokKind.LOWER_IDENT),
    (r"_(?:[a-z]|\?|\*|=)" + _IDENT_TAIL, TokKind.LOWER_IDENT),
    (r"[\+-]?[0-9]+", TokKind.NUM_LIT),
    (r'"[^"\\]*(?:\\.[^"\\]*)*"', TokKind.STR_LIT),
    (r"'(?:[ -~]|\\[nrt'|(\\)])'", TokKind.CHAR_LIT),
]

_LITERAL_RULES: list[tuple[str, TokKind]] = [
    ("pub", TokKind.PUBLIC),
    ("ext", TokKind.EXTERN),
    ("extern", TokKind.EXTERN),
    ("where", TokKind.WHERE),
    ("end", TokKind.END),
    ("module", TokKind.MODULE),
    ("use", TokKind.USE),
    ("data", TokKind.DATA),
    ("codata", TokKind.CODATA),
    ("alias", TokKind.ALIAS),
    ("def", TokKind.DEFINE),
    ("define", TokKind.DEFINE),
    ("main", TokKind.MAIN),
    ("let", TokKind.LET),
    ("in", TokKind.IN),
    ("do", TokKind.DO),
    ("ret", TokKind.RET),
    ("fn", TokKind.FN),
    ("pi", TokKind.PI),
    ("rec", TokKind.REC),
    ("match", TokKind.MATCH),
    ("comatch", TokKind.COMATCH),
    ("forall", TokKind.FORALL),
    ("exists", TokKind.EXISTS),
    ("@", TokKind.AT),
    ("pack", TokKind.PACK),
    ("(", TokKind.PAREN_OPEN),
    (")", TokKind.PAREN_CLOSE),
    ("[", TokKind.BRACKET_OPEN),
    ("]", TokKind.BRACKET_CLOSE),
    ("{", TokKind.BRACE_OPEN),
    ("}", TokKind.BRACE_CLOSE),
    (",", TokKind.COMMA),
    (":", TokKind.COLON),
    ("::", TokKind.COLON_COLON),
    ("=", TokKind.EQUALS),
    (";", TokKind.SEMICOLON),
    ("!", TokKind.FORCE),
    ("/", TokKind.SLASH),
    ("|", TokKind.BRANCH),
    ("+", TokKind.PLUS),
    (".", TokKind.DOT),
    ("..", TokKind.DOT_DOT),
    ("->", TokKind.ARROW),
    ("<-", TokKind.ASSIGN),
    ("_", TokKind.HOLE),
]

# Exact-text tokens beat patterns of the same match length.
_RULES: tuple[_Rule, ...] = (
    *(_Rule(re.compile(text), kind, 1) for text, kind in _REGEX_RULES),
    *(_Rule(re.compile(re.escape(text)), kind, 2) for text, kind in _LITERAL_RULES),
)


class Lexer:
    """Iterates over ``(start, token, end)`` triples of a source string.

    Offsets are character offsets. Whitespace and comments are skipped; the
    stream ends at the first character that starts no token.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[tuple[int, Tok, int]]:
        source = self.source
        pos = 0
        while pos < len(source):
            best: tuple[tuple[int, int], _Rule] | None = None
            for rule in _RULES:
                match = rule.pattern.match(source, pos)
                if match is None or match.end() == pos:
                    continue
                key = (match.end(), rule.priority)
                if best is None or key > best[0]:
                    best = (key, rule)
            if best is None:
                return
            (end, _), rule = best
            if rule.kind is not None:
                value = source[pos:end] if rule.kind.has_payload else None
                yield pos, Tok(rule.kind, value), end
            pos = end


def tokenize(source: str) -> list[tuple[int, Tok, int]]:
    """Return all ``(start, token, end)`` triples of ``source``."""
    return list(Lexer(source))