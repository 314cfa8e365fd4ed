import pytest

from zysurface.span import FileInfo, Span
from zysurface.syntax import (
    Annotation,
    Ctx,
    DefId,
    Define,
    Dependency,
    GenBind,
    Hole,
    Main,
    ModName,
    Modifiers,
    Module,
    ModuleTree,
    NameDef,
    NameRef,
    Paren,
    PatternId,
    PatVar,
    TermId,
    TypeDef,
    TypeDefHead,
    UseAll,
    UseDef,
    VarName,
    describe_declaration,
    get_def_id,
)


def test_add_def_records_name_and_span():
    ctx = Ctx()
    d = ctx.add_def(Span(1, 3).make(VarName("x")))
    assert ctx.defs[d] == VarName("x")
    assert ctx.spans[d] == Span(1, 3)
    assert d in ctx.added_defs


def test_ids_are_distinct_per_arena():
    ctx = Ctx()
    a = ctx.add_def(Span(0, 1).make(VarName("a")))
    b = ctx.add_def(Span(2, 3).make(VarName("b")))
    assert a != b
    p = ctx.add_pattern(Span(0, 1).make(PatVar(a)))
    t = ctx.add_term(Span(0, 1).make(Hole()))
    assert ctx.patterns[p] == PatVar(a)
    assert ctx.terms[t] == Hole()


def test_span_map_sets_positions():
    source = "ab\ncd"
    info = FileInfo(source, "f.zy")
    ctx = Ctx()
    t = ctx.add_term(Span(1, 4).make(Hole()))
    ctx.span_map(info)
    span = ctx.spans[t]
    assert span.span2 == (info.trans_span2(1), info.trans_span2(4))
    assert span.path == "f.zy"


def test_span_map_twice_fails():
    info = FileInfo("abc", "f.zy")
    ctx = Ctx()
    ctx.add_def(Span(0, 1).make(VarName("a")))
    ctx.span_map(info)
    with pytest.raises(RuntimeError):
        ctx.span_map(info)


def test_clear_added_id_skips_old_spans():
    info = FileInfo("abc", "f.zy")
    ctx = Ctx()
    d = ctx.add_def(Span(0, 1).make(VarName("a")))
    ctx.clear_added_id()
    ctx.span_map(info)
    assert ctx.spans[d].span2 is None
    assert not ctx.added_defs


def test_mod_decl_records_hierarchy():
    ctx = Ctx()
    returned = ctx.enter_mod(NameDef(ModName("A")))
    assert returned == NameDef(ModName("A"))
    ctx.mod_decl(NameDef(ModName("B")))
    ctx.exit_mod()
    ctx.mod_decl(NameDef(ModName("C")))
    assert ctx.deps == [Dependency(["A", "B"]), Dependency(["C"])]
    assert ctx.mod_stack == []


def test_merge_takes_other_spans():
    first = Ctx()
    first.add_def(Span(0, 1).make(VarName("a")))
    second = Ctx()
    second.add_def(Span(0, 1).make(VarName("a")))
    d = second.add_def(Span(5, 6).make(VarName("b")))
    first.merge(second)
    assert first.defs[d] == VarName("b")
    assert first.spans[d] == Span(5, 6)
    assert first.spans.defs is not second.spans.defs


def test_get_def_id_through_paren_and_annotation():
    ctx = Ctx()
    d = ctx.add_def(Span(0, 1).make(VarName("x")))
    hole = ctx.add_pattern(Span(0, 1).make(Hole()))
    var = ctx.add_pattern(Span(0, 1).make(PatVar(d)))
    ty = ctx.add_term(Span(0, 1).make(Hole()))
    ann = ctx.add_pattern(Span(0, 1).make(Annotation(var, ty)))
    paren = Paren([hole, ann])
    assert get_def_id(paren, ctx) == d
    assert get_def_id(Hole(), ctx) is None
    assert get_def_id(Paren([hole]), ctx) is None


def test_module_tree_navigation():
    tree = ModuleTree("root")
    tree.add_child("a")
    tree.add_child("a")
    assert [c.name for c in tree.children] == ["a"]
    node = tree.get_node_path(["root", "a"])
    assert node is tree.children[0]
    tree.set_file_id(["root", "a"], 7)
    assert tree.get_id_path(["root", "a"]) == 7
    assert tree.get_id_path(["root"]) is None
    assert tree.get_id_path(["other"]) is None
    assert tree.get_node_path(["root", "missing"]) is None


def test_module_tree_set_root_file_id():
    tree = ModuleTree("root")
    tree.set_file_id(["root"], 3)
    assert tree.get_id_path(["root"]) == 3


@pytest.mark.parametrize(
    "decl, expected",
    [
        (TypeDef(TypeDefHead.DATA, DefId(0), [], None), "type"),
        (Define(GenBind(False, False, PatternId(0), [], None, None)), "define"),
        (Module(NameDef(ModName("m")), None), "module: m"),
        (UseDef(NameRef([], UseAll())), "use"),
        (Main(TermId(0)), "main"),
    ],
)
def test_describe_declaration(decl, expected):
    assert describe_declaration(decl) == expected


def test_modifiers_with_inner_keeps_flags():
    mods = Modifiers(True, False, 3)
    mapped = mods.with_inner(lambda x: x + 1)
    assert (mapped.public, mapped.external, mapped.inner) == (True, False, 4)


def test_name_ref_display_and_equality():
    ref = NameRef([ModName("a"), ModName("b")], VarName("x"))
    assert str(ref) == "a/b/x"
    assert ref == NameRef((ModName("a"), ModName("b")), VarName("x"))
    assert hash(ref) == hash(NameRef((ModName("a"), ModName("b")), VarName("x")))


def test_span_arena_lookup_errors():
    ctx = Ctx()
    with pytest.raises(KeyError):
        ctx.spans[DefId(0)]
    with pytest.raises(TypeError):
        ctx.spans["x"]