"""Unit tests for the Swift syntax map and pattern matcher."""

from collections.abc import Callable

from tree_sitter import Parser

from swift_lint.core.ast import SourceUnit
from swift_lint.core.source import SourceText
from swift_lint.core.syntax_map import SyntaxMapMatcher, build_syntax_map
from swift_lint.models import COMMENT_AND_STRING_KINDS, SyntaxKind, TextRange

UnitFactory = Callable[[str], SourceUnit]


def _kinds(swift_parser: Parser, code: str) -> list[SyntaxKind]:
    source_bytes = code.encode("utf-8")
    tree = swift_parser.parse(source_bytes)
    return [token.kind for token in build_syntax_map(tree.root_node, source_bytes)]


def _texts(swift_parser: Parser, code: str, kind: SyntaxKind) -> list[str]:
    data = code.encode("utf-8")
    result: list[str] = []
    for token in build_syntax_map(swift_parser.parse(data).root_node, data):
        if token.kind is kind:
            result.append(data[token.offset : token.offset + token.length].decode())
    return result


class TestBuildSyntaxMap:
    def test_classifies_string_literal(self, swift_parser: Parser) -> None:
        texts = _texts(swift_parser, 'let s = "var x: T = T()"', SyntaxKind.STRING)
        assert any("var x: T = T()" in text for text in texts)

    def test_declaration_tokens(self, swift_parser: Parser) -> None:
        kinds = _kinds(swift_parser, "var url: URL = URL()")
        assert kinds == [
            SyntaxKind.KEYWORD,
            SyntaxKind.IDENTIFIER,
            SyntaxKind.TYPE_IDENTIFIER,
            SyntaxKind.IDENTIFIER,
        ]

    def test_line_comment(self, swift_parser: Parser) -> None:
        assert _kinds(swift_parser, "// var url: URL = URL()") == [SyntaxKind.COMMENT]

    def test_doc_comment(self, swift_parser: Parser) -> None:
        assert _kinds(swift_parser, "/// Documented.\nlet a = 1")[0] is SyntaxKind.DOC_COMMENT

    def test_tokens_are_sorted_and_disjoint(self, swift_parser: Parser) -> None:
        code = 'class A {\n  /* note */\n  let s = "x"\n  func f() -> Int { return 1 }\n}\n'
        source_bytes = code.encode("utf-8")
        tokens = build_syntax_map(swift_parser.parse(source_bytes).root_node, source_bytes)
        for previous, current in zip(tokens, tokens[1:], strict=False):
            assert previous.offset + previous.length <= current.offset


class TestSyntaxMapMatcher:
    def test_plain_match_ignores_syntax(self, make_unit: UnitFactory) -> None:
        unit = make_unit("// let a: A = A()\nlet b: B = B()")
        found = list(unit.matcher.match(r"let \w"))
        assert [r.location for r in found] == [3, 18]

    def test_kind_hints_drop_matches_in_comments(self, make_unit: UnitFactory) -> None:
        unit = make_unit("// let a: A = A()\nlet b: B = B()")
        kinds = [SyntaxKind.KEYWORD, SyntaxKind.IDENTIFIER]
        found = list(unit.matcher.match(r"let \w", kinds=kinds))
        assert [r.location for r in found] == [18]

    def test_excluding_kinds_drops_strings(self, make_unit: UnitFactory) -> None:
        unit = make_unit('let a: A = A(": B")')
        found = list(unit.matcher.match(r":\s?\w+", excluding_kinds=COMMENT_AND_STRING_KINDS))
        assert [unit.source.substring(r) for r in found] == [": A"]

    def test_within_restricts_search(self, make_unit: UnitFactory) -> None:
        unit = make_unit("let a: A = A()\nlet b: B = B()")
        found = list(unit.matcher.match(r":\s?\w+", within=TextRange(location=15, length=14)))
        assert [unit.source.substring(r) for r in found] == [": B"]

    def test_match_is_lazy(self, make_unit: UnitFactory) -> None:
        unit = make_unit("let a: A = A()")
        matches = unit.matcher.match(r"\w+")
        assert unit.source.substring(next(matches)) == "let"

    def test_kinds_in_range_with_multibyte_prefix(self, make_unit: UnitFactory) -> None:
        code = "// 👋\nlet url: URL = URL()"
        unit = make_unit(code)
        assert isinstance(unit.matcher, SyntaxMapMatcher)
        start = code.index("let")
        kinds = unit.matcher.kinds_in_range(TextRange(location=start, length=len(code) - start))
        assert kinds == [
            SyntaxKind.KEYWORD,
            SyntaxKind.IDENTIFIER,
            SyntaxKind.TYPE_IDENTIFIER,
            SyntaxKind.IDENTIFIER,
        ]

    def test_matcher_from_empty_syntax_map(self) -> None:
        matcher = SyntaxMapMatcher(SourceText("let a = 1"), [])
        assert list(matcher.match("let", kinds=[SyntaxKind.KEYWORD])) == []
        assert [r.location for r in matcher.match("let")] == [0]
