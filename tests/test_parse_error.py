import pytest

from zysurface.lexer import Tok, TokKind
from zysurface.parse_error import (
    ExtraToken,
    InvalidToken,
    ParseError,
    UnrecognizedEof,
    UnrecognizedToken,
    UserError,
    fmt_expected,
)
from zysurface.span import FileInfo

SOURCE = "let x = 1\nin y"
INFO = FileInfo(SOURCE, "main.zy")


def test_fmt_expected_empty():
    assert fmt_expected([]) == ""


def test_fmt_expected_single():
    assert fmt_expected(["a"]) == "; Expected one of a"


def test_fmt_expected_many():
    assert fmt_expected(["a", "b", "c"]) == "; Expected one of a, b or c"


def test_user_error_renders_message():
    assert UserError("boom").render(INFO) == "boom"


def test_invalid_token():
    assert InvalidToken(4).render(INFO) == f"Invalid token at main.zy:{INFO.trans_span2(4)}"


def test_unrecognized_eof():
    err = UnrecognizedEof(len(SOURCE), ["end"])
    assert err.render(INFO) == (
        f"Unrecognized EOF found at main.zy:{INFO.trans_span2(len(SOURCE))}; Expected one of end"
    )


def test_unrecognized_token():
    tok = Tok(TokKind.LOWER_IDENT, "x")
    err = UnrecognizedToken((4, tok, 5), [])
    assert err.render(INFO) == (
        f"Unrecognized token `LowerIdentifier(x)` found at main.zy:"
        f"{INFO.trans_span2(4)} - {INFO.trans_span2(5)}"
    )


def test_extra_token():
    tok = Tok(TokKind.IN)
    err = ExtraToken((10, tok, 12))
    assert err.render(INFO) == (
        f"Extra token `in` found at main.zy:{INFO.trans_span2(10)} - {INFO.trans_span2(12)}"
    )


def test_errors_are_raisable():
    with pytest.raises(ParseError) as caught:
        raise InvalidToken(0)
    assert caught.value.render(INFO) == "Invalid token at main.zy:0:0"


def test_out_of_range_location():
    with pytest.raises(ValueError):
        InvalidToken(len(SOURCE) + 5).render(INFO)