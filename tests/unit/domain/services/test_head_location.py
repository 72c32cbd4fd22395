"""Unit tests for FunctionHeadLocator against real source text."""

from max_params_linter.domain.entities import (
    FunctionKind,
    FunctionLikeNode,
    MemberOwner,
    ParameterNode,
    SourcePosition,
)
from max_params_linter.domain.services.head_location import FunctionHeadLocator
from max_params_linter.infrastructure.source_text import SourceText


def span(source: str, text: str, start: int = 0) -> tuple[int, int]:
    i = source.index(text, start)
    return (i, i + len(text))


def params_of(source: str, names: list[str], start: int) -> tuple[ParameterNode, ...]:
    found = []
    for name in names:
        r = span(source, name, start)
        found.append(ParameterNode(node_type="Identifier", range=r, name=name))
        start = r[1]
    return tuple(found)


def test_declaration_head_spans_keyword_and_name() -> None:
    code = "function test(a, b, c) {\n  // Just to make it longer\n}"
    node = FunctionLikeNode(
        kind=FunctionKind.DECLARATION,
        range=(0, len(code)),
        params=params_of(code, ["a", "b", "c"], 14),
        id_name="test",
        id_range=span(code, "test"),
        body_range=(code.index("{"), len(code)),
    )
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == SourcePosition(1, 0)
    assert loc.end == SourcePosition(1, 13)


def test_arrow_head_is_the_arrow_token() -> None:
    code = "const f = (a, b) => a;"
    start = code.index("(")
    node = FunctionLikeNode(
        kind=FunctionKind.ARROW,
        range=(start, len(code) - 1),
        params=params_of(code, ["a", "b"], start),
        body_range=(len(code) - 2, len(code) - 1),
    )
    arrow = code.index("=>")
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == SourcePosition(1, arrow)
    assert loc.end == SourcePosition(1, arrow + 2)


def test_arrow_head_skips_comments_and_return_type() -> None:
    code = "const f = (a /* => */): number => a;"
    start = code.index("(")
    node = FunctionLikeNode(
        kind=FunctionKind.ARROW,
        range=(start, len(code) - 1),
        params=params_of(code, ["a"], start),
        return_type_range=span(code, ": number"),
        body_range=(len(code) - 2, len(code) - 1),
    )
    arrow = code.rindex("=>")
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == SourcePosition(1, arrow)


def test_method_head_starts_at_member_key() -> None:
    code = "class A {\n  method(a, b) {}\n}"
    member_start = code.index("method")
    value_start = code.index("(")
    node = FunctionLikeNode(
        kind=FunctionKind.EXPRESSION,
        range=(value_start, code.index("}")),
        params=params_of(code, ["a", "b"], value_start),
        body_range=(code.index("{", value_start), code.index("}") + 1),
        owner=MemberOwner(node_type="MethodDefinition", range=(member_start, code.index("}") + 1), kind="method"),
    )
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == SourcePosition(2, 2)
    assert loc.end == SourcePosition(2, 8)


def test_type_parameters_are_skipped() -> None:
    code = "function f<T extends (x: number) => void>(a) {}"
    type_params = span(code, "<T extends (x: number) => void>")
    node = FunctionLikeNode(
        kind=FunctionKind.DECLARATION,
        range=(0, len(code)),
        params=params_of(code, ["a"], type_params[1]),
        id_name="f",
        id_range=(9, 10),
        type_parameters_range=type_params,
        body_range=(len(code) - 2, len(code)),
    )
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.end == SourcePosition(1, type_params[1])


def test_function_type_head_is_empty_at_paren() -> None:
    code = "type F = (a: number) => void;"
    start = code.index("(")
    node = FunctionLikeNode(
        kind=FunctionKind.FUNCTION_TYPE,
        range=(start, len(code) - 1),
        params=(ParameterNode(node_type="Identifier", range=span(code, "a: number"), name="a", annotation_type="TSNumberKeyword"),),
        return_type_range=span(code, "=> void"),
    )
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == loc.end == SourcePosition(1, start)


def test_bare_arrow_parameter_in_property_falls_back_to_parameter() -> None:
    code = "const o = { m: x => x };"
    member = span(code, "m: x => x")
    value_start = code.index("x =>")
    node = FunctionLikeNode(
        kind=FunctionKind.ARROW,
        range=(value_start, member[1]),
        params=(ParameterNode(node_type="Identifier", range=(value_start, value_start + 1), name="x"),),
        body_range=(member[1] - 1, member[1]),
        owner=MemberOwner(node_type="Property", range=member, kind="init", static_key_name="m"),
    )
    loc = FunctionHeadLocator.locate(node, SourceText(code))
    assert loc.start == SourcePosition(1, member[0])
    assert loc.end == SourcePosition(1, value_start)
