"""Syntax produced by name resolution: variables point at their definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from .syntax import (
    DefId,
    Define,
    Main,
    NameRef,
    Pattern,
    PatternId,
    Term,
    TermId,
    TypeDef,
    VarName,
)

Declaration = Union[TypeDef, Define, Main]

LookupTable = dict[tuple[str, ...], dict[VarName, DefId]]


@dataclass(frozen=True)
class PublicModule:
    """A submodule exported with ``pub``."""

    name: str


@dataclass(frozen=True)
class PublicDef:
    """A definition exported with ``pub``."""

    name: VarName


@dataclass(frozen=True)
class PublicUse:
    """A ``use`` re-exported with ``pub``."""

    target: NameRef


PublicDec = Union[PublicModule, PublicDef, PublicUse]


@dataclass
class ScopedTopLevel:
    """The resolved declarations of a file, in order."""

    declarations: list[Declaration] = field(default_factory=list)


@dataclass
class SymbolTable:
    """Definitions of the built-in types, once they are known."""

    set: Optional[DefId] = None
    vtype_kind: Optional[DefId] = None
    ctype_kind: Optional[DefId] = None
    thunk_type: Optional[DefId] = None
    ret_type: Optional[DefId] = None
    fn_type: Optional[DefId] = None
    int_type: Optional[DefId] = None
    string_type: Optional[DefId] = None


@dataclass
class ScopedCtx:
    """Arenas of resolved patterns and terms, plus the scope tables.

    ``lookup`` maps a module path to the names visible under it; the empty
    path is the local scope. ``peeks`` holds declarations whose definition
    is expected later in the file.
    """

    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    patterns: dict[PatternId, Pattern] = field(default_factory=dict)
    terms: dict[TermId, Term] = field(default_factory=dict)
    lookup: LookupTable = field(default_factory=dict)
    current_pub: list[PublicDec] = field(default_factory=list)
    peeks: dict[VarName, DefId] = field(default_factory=dict)

    def add_pattern(self, pattern_id: PatternId, pattern: Pattern) -> PatternId:
        if pattern_id in self.patterns:
            raise ValueError("duplicate pattern inserted")
        self.patterns[pattern_id] = pattern
        return pattern_id

    def add_term(self, term_id: TermId, term: Term) -> TermId:
        if term_id in self.terms:
            raise ValueError("duplicate term inserted")
        self.terms[term_id] = term
        return term_id