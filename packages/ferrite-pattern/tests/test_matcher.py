import pytest
from ferrite_pattern import (
    Alternation,
    Capture,
    CompiledPattern,
    Span,
    SyntaxNode,
    Variant,
    Wildcard,
    ZeroOrMore,
    ZeroOrOne,
    iter_nodes,
    match,
    pattern,
)


def node(kind, *children, label=None):
    return SyntaxNode(kind=kind, children=children, span=Span(0, 0), label=label)


def test_variant_matches_kind_and_children():
    tree = node("If", node("Path"), node("Block"))
    assert match(Variant("If", (Wildcard(), Variant("Block"))), tree) is not None
    assert match(Variant("If", (Wildcard(), Variant("Path"))), tree) is None
    assert match(Variant("While"), tree) is None


def test_variant_slots_must_consume_all_children():
    with_else = node("If", node("Path"), node("Block"), node("Block"))
    assert match(Variant("If", (Wildcard(), Wildcard())), with_else) is None
    assert match(Variant("If", (Wildcard(), Wildcard(), Wildcard())), with_else) is not None


def test_bare_kind_ignores_children_but_empty_parens_do_not():
    tree = node("Block", node("Semi", node("Call")))
    assert pattern("Block").match(tree) is not None
    assert pattern("Block()").match(tree) is None
    assert pattern("Block()").match(node("Block")) is not None


def test_wildcard_binds_nothing():
    result = match(Wildcard(), node("Lit"))
    assert result is not None
    assert len(result) == 0


def test_alternation_returns_first_success():
    tree = node("Semi", node("Call"))
    alt = Alternation(
        (
            Capture("first", Variant("Semi", (Wildcard(),))),
            Capture("second", Variant("Semi", (Capture("inner", Wildcard()),))),
        )
    )
    result = match(alt, tree)
    assert result["first"] is tree
    assert result["second"] is None
    assert result["inner"] is None


def test_alternation_falls_through_to_later_options():
    compiled = pattern("Expr(If#x) | Semi(If#x)")
    inner = node("If")
    result = compiled.match(node("Semi", inner))
    assert result.x is inner
    assert compiled.match(node("Semi", node("Loop"))) is None


def test_earliest_anchor_determines_the_tail():
    s0, s1, s2, s3 = node("Local"), node("Anchor"), node("Local"), node("Anchor")
    block = node("Block", s0, s1, s2, s3)

    result = pattern("Block(_* Anchor#anchor _*#tail)").match(block)

    assert result.anchor is s1
    assert result.tail == (s2, s3)


def test_anchor_search_without_tail_capture():
    s0, s1 = node("Local"), node("Anchor")
    result = pattern("Block(_* Anchor#anchor _*)").match(node("Block", s0, s1))
    assert result.anchor is s1


def test_anchor_search_fails_only_when_nothing_matches():
    block = node("Block", node("Local"), node("Local"))
    assert pattern("Block(_* Anchor _*#tail)").match(block) is None


def test_tail_is_empty_when_anchor_is_last():
    anchor = node("Anchor")
    result = pattern("Block(_* Anchor _*#tail)").match(node("Block", node("Local"), anchor))
    assert result.tail == ()


def test_zero_or_more_with_a_specific_inner_pattern():
    compiled = CompiledPattern.build(
        Variant("Block", (Capture("locals", ZeroOrMore(Variant("Local"))), Variant("Semi")))
    )
    a, b = node("Local"), node("Local")
    assert compiled.match(node("Block", a, b, node("Semi"))).locals == (a, b)
    assert compiled.match(node("Block", a, node("Expr"), node("Semi"))) is None


def test_optional_slot_binds_none_when_absent():
    compiled = pattern("If(_, _, _?#otherwise)")
    else_block = node("Block")
    assert compiled.match(node("If", node("Path"), node("Block"))).otherwise is None
    assert compiled.match(node("If", node("Path"), node("Block"), else_block)).otherwise is else_block


def test_optional_slot_backtracks_to_absent():
    compiled = pattern("Block(Local?#first Local)")
    only = node("Local")
    result = compiled.match(node("Block", only))
    assert result.first is None


def test_captures_typed_accessors():
    s1, s2 = node("Semi"), node("Semi")
    result = pattern("Block(Local#head _*#rest)").match(node("Block", node("Local"), s1, s2))
    assert result.sequence("rest") == (s1, s2)
    assert result.node("head").kind == "Local"
    with pytest.raises(TypeError):
        result.node("rest")
    with pytest.raises(AttributeError):
        result.missing


def test_match_is_deterministic():
    block = node("Block", node("Anchor"), node("Local"), node("Anchor"))
    compiled = pattern("Block(_* Anchor#a _*#tail)")
    first = compiled.match(block)
    second = compiled.match(block)
    assert first == second
    assert match(compiled.pattern, block) == first


def test_standard_functions_expand():
    body = node("Block", node("Semi", node("Continue")))
    loop = node("While", node("Path"), body, label="'outer")
    result = pattern("some_loop(Block(expr_or_semi(Continue#c)#stmt)#body)").match(loop)
    assert result.body is body
    assert result.c.kind == "Continue"
    assert result.stmt.kind == "Semi"


def test_iter_nodes_is_preorder():
    leaf_a, leaf_b = node("A"), node("B")
    mid = node("Mid", leaf_a)
    root = node("Root", mid, leaf_b)
    assert [n.kind for n in iter_nodes(root)] == ["Root", "Mid", "A", "B"]
