# zysurface

Building blocks for the front end of the Zydeco language: source spans,
a lexer, literal escape handling, the textual syntax tree with its arena
context and module tree, parse-error rendering, and the data structures
that hold scoped (name-resolved) syntax.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `zysurface.span` — `FileInfo` (a line table of a source string;
  `trans_span2` turns a character offset into a `Cursor2` line/column,
  `display_path` gives the file path), `Span` (a start/end offset range;
  `set_info` attaches line/column positions and the path, once only),
  and `Sp`, a value paired with its span whose equality and hash ignore
  the span. `span_map(value, f)` applies `f` to every span found in `Sp`
  values, lists, tuples and objects with a `map_spans` method.
- `zysurface.monoid` — the abstract `Monoid` class (`empty`, `append`,
  `extend`, `concat`), plus `sp_empty` and `sp_append` for spanned
  monoid values; an appended value carries the right-hand span.
- `zysurface.escape` — `apply_string_escapes` expands `\n`, `\r`, `\t`
  and other backslash escapes in string literal bodies;
  `apply_char_escapes` decodes a quoted character literal such as `'a'`
  or `'\n'`.
- `zysurface.lexer` — `TokKind`, `Tok`, `Lexer` and `tokenize`. The
  lexer yields `(start, token, end)` triples with character offsets,
  skips whitespace and `//`, `#` and `/* */` comments, prefers the
  longest match with keywords and punctuation winning ties, and stops at
  the first character that starts no token.
- `zysurface.syntax` — the textual syntax tree (names, patterns, terms,
  type definitions, modules, `use` declarations, `Modifiers`,
  `TopLevel`), id types `DefId`, `PatternId` and `TermId`, the `Ctx`
  arena with its `SpanArena`, `get_def_id`, `describe_declaration`, and
  `ModuleTree`.
- `zysurface.parse_error` — `ParseError` and its variants `UserError`,
  `InvalidToken`, `UnrecognizedEof`, `UnrecognizedToken` and
  `ExtraToken`; each `render(file_info)` produces a message with file
  path and line/column positions. `fmt_expected` formats the list of
  expected tokens.
- `zysurface.scoped` — the resolved syntax: `PublicModule`,
  `PublicDef`, `PublicUse`, `ScopedTopLevel`, `SymbolTable` and
  `ScopedCtx`, whose `add_pattern` and `add_term` raise `ValueError` on a
  duplicate id.

## Example

```python
from zysurface.lexer import tokenize
from zysurface.span import FileInfo

source = "main { let x = 1 in ! exit x } end"
for start, tok, end in tokenize(source):
    print(start, tok, end)

info = FileInfo(source, "example.zy")
print(info.trans_span2(5))  # 1:5
```

## What this package does not do

- It has no parser: nothing here turns a token stream into a `TopLevel`.
  Syntax trees are built by calling `Ctx.add_def`, `Ctx.add_pattern` and
  `Ctx.add_term` directly.
- It does not perform name resolution. `zysurface.scoped` provides the
  containers for resolved syntax, but no code fills them from a textual
  `TopLevel`.
- It does not load projects or files from disk, type-check, or run
  programs, and it provides no command-line tool.