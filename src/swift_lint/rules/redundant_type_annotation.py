import logging
from collections.abc import Iterator

from swift_lint.config import SeverityConfiguration
from swift_lint.core.ast import SourceUnit
from swift_lint.core.correct import apply_corrections
from swift_lint.models import (
    COMMENT_AND_STRING_KINDS,
    VARIABLE_KINDS,
    Correction,
    RuleDescription,
    StyleViolation,
    SyntaxKind,
    TextRange,
)

logger = logging.getLogger(__name__)

TYPE_ANNOTATION_PATTERN = r":\s?\w+"
DECLARATION_PATTERN = rf"(var|let)\s?\w+{TYPE_ANNOTATION_PATTERN}\s?=\s?\w+(\(|.)"
DECLARATION_KINDS = (SyntaxKind.KEYWORD, SyntaxKind.IDENTIFIER, SyntaxKind.TYPE_IDENTIFIER, SyntaxKind.IDENTIFIER)
UI_BINDING_ATTRIBUTE = "IBInspectable"

# Horizontal whitespace only (tab and Unicode Zs); a line break keeps the spellings apart.
_HORIZONTAL_WHITESPACE = (
    " \t\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u202f\u205f\u3000"
)
# Characters stripped around the initializer so that `Type(` and `Type.` compare as `Type`.
_RHS_TRIM_CHARACTERS = ".(" + _HORIZONTAL_WHITESPACE


def is_false_positive(candidate: str) -> bool:
    """Return True unless the annotated type is spelled exactly like the initializer's type.

    A purely textual heuristic: ``url: URL = URL()`` is redundant, while
    ``url: CustomStringConvertible = URL()`` is not, because the spellings differ.
    """
    components = candidate.split("=")
    if len(components) != 2:
        return True
    lhs, rhs = components
    if ":" not in lhs:
        return True

    declared_type = lhs.rsplit(":", 1)[1].strip(_HORIZONTAL_WHITESPACE)
    initializer_type = rhs.strip(_HORIZONTAL_WHITESPACE).strip(_RHS_TRIM_CHARACTERS)
    return declared_type != initializer_type


class RedundantTypeAnnotationRule:
    description = RuleDescription(
        identifier="redundant_type_annotation",
        name="Redundant Type Annotation",
        description="Variables should not have redundant type annotation",
        kind="idiomatic",
        opt_in=True,
        non_triggering_examples=(
            "var url = URL()",
            "var url: CustomStringConvertible = URL()",
            "@IBInspectable var color: UIColor = UIColor.white",
        ),
        triggering_examples=(
            "var url↓:URL=URL()",
            'var url↓:URL = URL(string: "")',
            "var url↓: URL = URL()",
            "let url↓: URL = URL()",
            "lazy var url↓: URL = URL()",
            "let alphanumerics↓: CharacterSet = CharacterSet.alphanumerics",
            "class ViewController: UIViewController {\n"
            "  func someMethod() {\n"
            "    let myVar↓: Int = Int(5)\n"
            "  }\n"
            "}",
        ),
        corrections={
            "var url↓: URL = URL()": "var url = URL()",
            "let url↓: URL = URL()": "let url = URL()",
            "let alphanumerics↓: CharacterSet = CharacterSet.alphanumerics": (
                "let alphanumerics = CharacterSet.alphanumerics"
            ),
            "class ViewController: UIViewController {\n"
            "  func someMethod() {\n"
            "    let myVar↓: Int = Int(5)\n"
            "  }\n"
            "}": (
                "class ViewController: UIViewController {\n"
                "  func someMethod() {\n"
                "    let myVar = Int(5)\n"
                "  }\n"
                "}"
            ),
        },
    )

    def __init__(self, configuration: SeverityConfiguration | None = None) -> None:
        self.configuration = configuration or SeverityConfiguration()

    def validate(self, unit: SourceUnit) -> list[StyleViolation]:
        return [
            StyleViolation(
                rule_id=self.description.identifier,
                rule_name=self.description.name,
                severity=self.configuration.severity,
                location=unit.source.location(violation_range.location),
                offset=violation_range.location,
                reason=self.description.description,
            )
            for violation_range in self.violation_ranges(unit)
        ]

    def violation_ranges(self, unit: SourceUnit) -> list[TextRange]:
        ranges: list[TextRange] = []
        for candidate in self._candidates(unit):
            if is_false_positive(unit.source.substring(candidate)) or self._is_ui_binding(unit, candidate):
                continue
            annotation = self._annotation_range(unit, candidate)
            if annotation is not None:
                ranges.append(annotation)
        return ranges

    def substitution(self, violation_range: TextRange, unit: SourceUnit) -> Correction:
        return Correction(range=violation_range, replacement="")

    def correct(self, unit: SourceUnit) -> tuple[str, list[Correction]]:
        """Return the corrected text and the corrections that produced it."""
        corrections = [self.substitution(r, unit) for r in self.violation_ranges(unit)]
        if not corrections:
            return unit.source.contents, []
        return apply_corrections(unit.source.contents, corrections), corrections

    def _candidates(self, unit: SourceUnit) -> Iterator[TextRange]:
        return unit.matcher.match(DECLARATION_PATTERN, kinds=DECLARATION_KINDS)

    def _is_ui_binding(self, unit: SourceUnit, candidate: TextRange) -> bool:
        byte_range = unit.source.char_range_to_byte_range(candidate.location, candidate.length)
        if byte_range is None:
            return False
        info = unit.structure.declaration_info(byte_range.location)
        if info is None or info.kind not in VARIABLE_KINDS:
            return False
        if UI_BINDING_ATTRIBUTE in info.attributes:
            logger.debug("Skipping @%s declaration at offset %d", UI_BINDING_ATTRIBUTE, candidate.location)
            return True
        return False

    def _annotation_range(self, unit: SourceUnit, candidate: TextRange) -> TextRange | None:
        matches = unit.matcher.match(
            TYPE_ANNOTATION_PATTERN,
            excluding_kinds=COMMENT_AND_STRING_KINDS,
            within=candidate,
        )
        return next(matches, None)
