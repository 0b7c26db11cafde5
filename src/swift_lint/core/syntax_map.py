import re
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from functools import lru_cache

from tree_sitter import Node

from swift_lint.core.source import SourceText
from swift_lint.models import SyntaxKind, SyntaxToken, TextRange

_COMMENT_NODES = frozenset({"comment", "multiline_comment"})
_STRING_NODES = frozenset({"line_string_literal", "multi_line_string_literal", "raw_string_literal", "regex_literal"})
_INTERPOLATION_NODES = frozenset({"interpolated_expression", "raw_str_interpolation"})
_NUMBER_NODES = frozenset({"integer_literal", "real_literal", "hex_literal", "oct_literal", "bin_literal"})
_KEYWORD_TEXT = re.compile(r"#?[A-Za-z_]+")


@lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _comment_kind(source_bytes: bytes, node: Node) -> SyntaxKind:
    head = source_bytes[node.start_byte : node.start_byte + 3]
    if head == b"///" or (head == b"/**" and node.end_byte - node.start_byte > 4):
        return SyntaxKind.DOC_COMMENT
    return SyntaxKind.COMMENT


def _token(kind: SyntaxKind, start: int, end: int) -> SyntaxToken:
    return SyntaxToken(kind=kind, offset=start, length=end - start)


def _string_tokens(node: Node, source_bytes: bytes) -> Iterator[SyntaxToken]:
    """Split a string literal around its interpolations, which are classified as code."""
    cursor = node.start_byte
    for child in node.named_children:
        if child.type not in _INTERPOLATION_NODES:
            continue
        if child.start_byte > cursor:
            yield _token(SyntaxKind.STRING, cursor, child.start_byte)
        yield from _classify(child, source_bytes)
        cursor = child.end_byte
    if node.end_byte > cursor:
        yield _token(SyntaxKind.STRING, cursor, node.end_byte)


def _classify(node: Node, source_bytes: bytes) -> Iterator[SyntaxToken]:
    node_type = node.type
    if node_type in _COMMENT_NODES:
        yield _token(_comment_kind(source_bytes, node), node.start_byte, node.end_byte)
    elif node_type in _STRING_NODES:
        yield from _string_tokens(node, source_bytes)
    elif node_type == "attribute":
        yield _token(SyntaxKind.ATTRIBUTE, node.start_byte, node.end_byte)
    elif node_type == "simple_identifier":
        yield _token(SyntaxKind.IDENTIFIER, node.start_byte, node.end_byte)
    elif node_type == "type_identifier":
        yield _token(SyntaxKind.TYPE_IDENTIFIER, node.start_byte, node.end_byte)
    elif node_type in _NUMBER_NODES:
        yield _token(SyntaxKind.NUMBER, node.start_byte, node.end_byte)
    elif node.child_count == 0:
        if not node.is_named and _KEYWORD_TEXT.fullmatch(node_type):
            yield _token(SyntaxKind.KEYWORD, node.start_byte, node.end_byte)
    else:
        for child in node.children:
            yield from _classify(child, source_bytes)


def build_syntax_map(root: Node, source_bytes: bytes) -> list[SyntaxToken]:
    """Flatten a Swift syntax tree into sorted, non-overlapping classified tokens."""
    tokens = [token for token in _classify(root, source_bytes) if token.length > 0]
    tokens.sort(key=lambda t: t.offset)
    return tokens


class SyntaxMapMatcher:
    """Regular-expression search over a source text, constrained by its syntax map.

    Implements the ``PatternMatcher`` protocol.
    """

    def __init__(self, source: SourceText, tokens: Sequence[SyntaxToken]) -> None:
        self._source = source
        self._tokens = list(tokens)
        self._token_ends = [t.offset + t.length for t in self._tokens]

    def kinds_in_range(self, text_range: TextRange) -> list[SyntaxKind]:
        byte_range = self._source.char_range_to_byte_range(text_range.location, text_range.length)
        if byte_range is None:
            return []
        kinds: list[SyntaxKind] = []
        index = bisect_right(self._token_ends, byte_range.location)
        while index < len(self._tokens) and self._tokens[index].offset < byte_range.end:
            kinds.append(self._tokens[index].kind)
            index += 1
        return kinds

    def match(
        self,
        pattern: str,
        kinds: Sequence[SyntaxKind] | None = None,
        excluding_kinds: Iterable[SyntaxKind] | None = None,
        within: TextRange | None = None,
    ) -> Iterator[TextRange]:
        contents = self._source.contents
        start, end = (within.location, within.end) if within else (0, len(contents))
        wanted = list(kinds) if kinds is not None else None
        excluded = frozenset(excluding_kinds or ())

        for found in _compile(pattern).finditer(contents, start, end):
            found_range = TextRange(location=found.start(), length=found.end() - found.start())
            if wanted is None and not excluded:
                yield found_range
                continue
            kinds_found = self.kinds_in_range(found_range)
            if wanted is not None and kinds_found != wanted:
                continue
            if excluded.intersection(kinds_found):
                continue
            yield found_range
