from dataclasses import dataclass
from pathlib import Path
from typing import cast

from tree_sitter import Tree
from tree_sitter_language_pack import SupportedLanguage, get_parser

from swift_lint.core.languages import detect_language_from_path, normalize_language
from swift_lint.core.ports.matcher import PatternMatcher
from swift_lint.core.ports.structure import SyntaxStructure
from swift_lint.core.source import SourceText
from swift_lint.core.structure import TreeSitterStructure
from swift_lint.core.syntax_map import SyntaxMapMatcher, build_syntax_map


@dataclass(frozen=True)
class SourceUnit:
    """One parsed source text together with the lookups rules run against."""

    source: SourceText
    matcher: PatternMatcher
    structure: SyntaxStructure


def parse_source(source: SourceText, language: str = "swift") -> Tree:
    parser = get_parser(cast(SupportedLanguage, normalize_language(language)))
    return parser.parse(source.data)


def load_source_unit(source: SourceText, language: str = "swift") -> SourceUnit:
    tree = parse_source(source, language)
    root = tree.root_node
    return SourceUnit(
        source=source,
        matcher=SyntaxMapMatcher(source, build_syntax_map(root, source.data)),
        structure=TreeSitterStructure(root, source.data),
    )


def load_source_unit_from_file(path: str) -> SourceUnit:
    file_path = Path(path)
    return load_source_unit(SourceText.from_path(file_path), detect_language_from_path(file_path))
