"""Surface syntax trees, the arenas that hold them, and the module tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar, Union

from .span import FileInfo, Sp, Span

T = TypeVar("T")
U = TypeVar("U")

# ---------------------------------------------------------------- binders


@dataclass(frozen=True)
class ModName:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VarName:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class CtorName:
    name: str


@dataclass(frozen=True)
class DtorName:
    name: str


TypeArmName = Union[CtorName, DtorName]


@dataclass(frozen=True)
class NameDef(Generic[T]):
    name: T


@dataclass(frozen=True)
class NameRef(Generic[T]):
    """A possibly module-qualified reference such as ``a/b/x``."""

    path: tuple[ModName, ...]
    name: T

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def __str__(self) -> str:
        return "".join(f"{m}/" for m in self.path) + str(self.name)


# ---------------------------------------------------------------- ids


@dataclass(frozen=True, order=True)
class DefId:
    index: int


@dataclass(frozen=True, order=True)
class PatternId:
    index: int


@dataclass(frozen=True, order=True)
class TermId:
    index: int


# ---------------------------------------------------------------- structural


@dataclass
class Paren(Generic[T]):
    """``(...)`` as a paren-shaped container."""

    items: list[T]


@dataclass
class Annotation(Generic[T, U]):
    """``(term : ty)``."""

    term: T
    ty: U


@dataclass(frozen=True)
class Hole:
    """``_``."""


# ---------------------------------------------------------------- patterns


@dataclass(frozen=True)
class PatVar:
    """A pattern binding a variable."""

    def_id: DefId


Pattern = Union[Annotation, Hole, PatVar, Paren]


# ---------------------------------------------------------------- terms


@dataclass(frozen=True)
class Var(Generic[T]):
    """A variable occurrence in a term."""

    ref: T


@dataclass
class GenBind:
    """General binding structure shared by ``let`` and ``def``."""

    rec: bool
    fun: bool
    binder: PatternId
    params: list[PatternId]
    ty: Optional[TermId]
    bindee: Optional[TermId]


@dataclass
class Abstraction:
    params: list[PatternId]
    body: TermId


@dataclass
class Application:
    function: TermId
    argument: TermId


@dataclass
class Recursion:
    binder: PatternId
    body: TermId


@dataclass
class Pi:
    params: list[PatternId]
    body: TermId


@dataclass
class Arrow:
    ty_in: TermId
    ty_out: TermId


@dataclass
class Forall:
    params: list[PatternId]
    body: TermId


@dataclass
class Exists:
    params: list[PatternId]
    body: TermId


@dataclass
class Thunk:
    body: TermId


@dataclass
class Force:
    body: TermId


@dataclass
class Return:
    body: TermId


@dataclass
class Bind:
    """``do x <- b; ...``."""

    binder: PatternId
    bindee: TermId
    tail: TermId


@dataclass
class PureBind:
    """``let x = a in ...``."""

    binding: GenBind
    tail: TermId


@dataclass
class Constructor:
    name: CtorName
    args: TermId


@dataclass
class Matcher:
    name: CtorName
    binders: PatternId
    tail: TermId


@dataclass
class Match:
    scrut: TermId
    arms: list[Matcher]


@dataclass
class CoMatcher:
    name: DtorName
    binders: list[PatternId]
    tail: TermId


@dataclass
class CoMatch:
    arms: list[CoMatcher]


@dataclass
class Destructor:
    term: TermId
    name: DtorName


@dataclass(frozen=True)
class Literal:
    """An integer, string or character literal; characters are one-char strings."""

    value: int | str
    is_char: bool = False


Term = Union[
    Annotation, Hole, Var, Paren, Abstraction, Application, Recursion, Pi, Arrow,
    Forall, Exists, Thunk, Force, Return, Bind, PureBind, Constructor, Match,
    CoMatch, Destructor, Literal,
]

# ---------------------------------------------------------------- top level


class TypeDefHead(enum.Enum):
    DATA = "data"
    CODATA = "codata"


@dataclass
class TypeArm:
    name: TypeArmName
    args: list[TermId]
    out: Optional[TermId]


@dataclass
class TypeDef:
    head: TypeDefHead
    name: DefId
    params: list[PatternId]
    arms: Optional[list[TypeArm]]


@dataclass
class Define:
    binding: GenBind


@dataclass
class Module:
    name: NameDef[ModName]
    top: Optional[TopLevel]

    def __str__(self) -> str:
        return self.name.name.name


@dataclass(frozen=True)
class UseAll:
    pass


@dataclass(frozen=True)
class UseAlias:
    name: VarName
    alias: VarName


@dataclass(frozen=True)
class UseCluster:
    uses: tuple[UseDef, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "uses", tuple(self.uses))


UseEnum = Union[VarName, UseAlias, UseAll, UseCluster]


@dataclass(frozen=True)
class UseDef:
    target: NameRef


@dataclass
class Main:
    term: TermId


Declaration = Union[TypeDef, Define, Module, UseDef, Main]


@dataclass
class Modifiers(Generic[T]):
    public: bool
    external: bool
    inner: T

    def with_inner(self, f: Callable[[T], U]) -> Modifiers[U]:
        """Replace the inner value by ``f(inner)``, keeping the modifiers."""
        return Modifiers(self.public, self.external, f(self.inner))


@dataclass
class TopLevel:
    declarations: list[Modifiers] = field(default_factory=list)


def describe_declaration(decl: Declaration) -> str:
    """A short description of what kind of declaration ``decl`` is."""
    if isinstance(decl, TypeDef):
        return "type"
    if isinstance(decl, Define):
        return "define"
    if isinstance(decl, Module):
        return f"module: {decl}"
    if isinstance(decl, UseDef):
        return "use"
    if isinstance(decl, Main):
        return "main"
    raise TypeError(f"not a declaration: {type(decl).__name__}")


# ---------------------------------------------------------------- dependency


@dataclass(frozen=True)
class Dependency:
    """A submodule declared in a file, by its module path."""

    hierarchy: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "hierarchy", tuple(self.hierarchy))


# ---------------------------------------------------------------- context


@dataclass
class SpanArena:
    """Source spans of every definition, pattern and term."""

    defs: dict[DefId, Span] = field(default_factory=dict)
    patterns: dict[PatternId, Span] = field(default_factory=dict)
    terms: dict[TermId, Span] = field(default_factory=dict)

    def _table_for(self, key: object) -> dict:
        if isinstance(key, DefId):
            return self.defs
        if isinstance(key, PatternId):
            return self.patterns
        if isinstance(key, TermId):
            return self.terms
        raise TypeError(f"not an arena id: {key!r}")

    def __getitem__(self, key: DefId | PatternId | TermId) -> Span:
        return self._table_for(key)[key]

    def insert(self, id_type: type, span: Span):
        table = self._table_for(id_type(0))
        new_id = id_type(len(table))
        table[new_id] = span
        return new_id

    def copy(self) -> SpanArena:
        return SpanArena(
            {k: v.copy() for k, v in self.defs.items()},
            {k: v.copy() for k, v in self.patterns.items()},
            {k: v.copy() for k, v in self.terms.items()},
        )


@dataclass
class Ctx:
    """Arenas of the parsed syntax, plus module bookkeeping."""

    spans: SpanArena = field(default_factory=SpanArena)
    defs: dict[DefId, VarName] = field(default_factory=dict)
    patterns: dict[PatternId, Pattern] = field(default_factory=dict)
    terms: dict[TermId, Term] = field(default_factory=dict)
    project: Optional[str] = None
    deps: list[Dependency] = field(default_factory=list)
    uses: list[NameRef] = field(default_factory=list)
    mod_stack: list[str] = field(default_factory=list)
    added_defs: set[DefId] = field(default_factory=set)
    added_patterns: set[PatternId] = field(default_factory=set)
    added_terms: set[TermId] = field(default_factory=set)

    def add_def(self, spanned: Sp[VarName]) -> DefId:
        def_id = self.spans.insert(DefId, spanned.info)
        self.defs[def_id] = spanned.inner
        self.added_defs.add(def_id)
        return def_id

    def add_pattern(self, spanned: Sp[Pattern]) -> PatternId:
        pattern_id = self.spans.insert(PatternId, spanned.info)
        self.patterns[pattern_id] = spanned.inner
        self.added_patterns.add(pattern_id)
        return pattern_id

    def add_term(self, spanned: Sp[Term]) -> TermId:
        term_id = self.spans.insert(TermId, spanned.info)
        self.terms[term_id] = spanned.inner
        self.added_terms.add(term_id)
        return term_id

    def enter_mod(self, mod_name: NameDef[ModName]) -> NameDef[ModName]:
        self.mod_stack.append(mod_name.name.name)
        return mod_name

    def mod_decl(self, mod_name: NameDef[ModName]) -> None:
        """Record a body-less submodule declaration as a dependency."""
        self.deps.append(Dependency((*self.mod_stack, mod_name.name.name)))

    def update_dep_pairs(self, use_def: NameRef) -> None:
        """Record a use declaration; uses add no file dependencies."""
        self.uses.append(use_def)

    def exit_mod(self) -> None:
        if self.mod_stack:
            self.mod_stack.pop()

    def span_map(self, file_info: FileInfo) -> None:
        """Attach file positions to every span added since the last clear."""
        for table, added in (
            (self.spans.defs, self.added_defs),
            (self.spans.patterns, self.added_patterns),
            (self.spans.terms, self.added_terms),
        ):
            for key in sorted(added):
                table[key].set_info(file_info)

    def merge(self, other: Ctx) -> None:
        self.defs.update(other.defs)
        self.patterns.update(other.patterns)
        self.terms.update(other.terms)
        self.spans = other.spans.copy()

    def clear_added_id(self) -> None:
        self.added_defs.clear()
        self.added_patterns.clear()
        self.added_terms.clear()


def get_def_id(pattern: Pattern, ctx: Ctx) -> Optional[DefId]:
    """The first variable a pattern binds, if any."""
    if isinstance(pattern, Annotation):
        return get_def_id(ctx.patterns[pattern.term], ctx)
    if isinstance(pattern, Hole):
        return None
    if isinstance(pattern, PatVar):
        return pattern.def_id
    if isinstance(pattern, Paren):
        for item in pattern.items:
            found = get_def_id(ctx.patterns[item], ctx)
            if found is not None:
                return found
        return None
    raise TypeError(f"not a pattern: {type(pattern).__name__}")


# ---------------------------------------------------------------- module tree


@dataclass
class ModuleTree:
    """A tree of module names, optionally tagged with the file that defines them."""

    name: str = ""
    file_id: Optional[int] = None
    children: list[ModuleTree] = field(default_factory=list)

    def add_child(self, mod_name: str) -> None:
        if not any(child.name == mod_name for child in self.children):
            self.children.append(ModuleTree(mod_name))

    def set_file_id(self, path: list[str], file_id: int) -> None:
        if len(path) == 1:
            self.file_id = file_id
            return
        if len(path) < 2:
            return
        for child in self.children:
            if child.name == path[1]:
                child.set_file_id(path[1:], file_id)

    def get_node_path(self, path: list[str]) -> Optional[ModuleTree]:
        """The node at ``path``, whose first element names this node."""
        if len(path) == 1 and self.name == path[0]:
            return self
        if len(path) < 2:
            return None
        for child in self.children:
            if child.name == path[1]:
                return child.get_node_path(path[1:])
        return None

    def get_id_path(self, path: list[str]) -> Optional[int]:
        if len(path) == 1 and self.name == path[0]:
            return self.file_id
        if len(path) <= 1:
            return None
        for child in self.children:
            if child.name == path[1]:
                return child.get_id_path(path[1:])
        return None