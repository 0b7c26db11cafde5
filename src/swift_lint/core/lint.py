import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from swift_lint.config import SeverityConfiguration
from swift_lint.core.ast import load_source_unit, load_source_unit_from_file
from swift_lint.core.languages import collect_source_files
from swift_lint.core.source import SourceText
from swift_lint.models import Correction, Severity, StyleViolation
from swift_lint.rules import RedundantTypeAnnotationRule

logger = logging.getLogger(__name__)


@dataclass
class LintReport:
    files: list[str] = field(default_factory=list)
    violations: list[StyleViolation] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(v.severity is Severity.ERROR for v in self.violations)


@dataclass(frozen=True)
class CorrectionResult:
    path: str
    corrections: tuple[Correction, ...]


def lint_source(source: SourceText, rule: RedundantTypeAnnotationRule | None = None) -> list[StyleViolation]:
    rule = rule or RedundantTypeAnnotationRule()
    return rule.validate(load_source_unit(source))


def run_lint(
    paths: Sequence[str],
    configuration: SeverityConfiguration | None = None,
    code: str | None = None,
) -> LintReport:
    """Lint files (directories are walked) or a single code string."""
    rule = RedundantTypeAnnotationRule(configuration)
    report = LintReport()

    if code is not None:
        report.violations.extend(lint_source(SourceText(code), rule))
        return report

    for file_path in collect_source_files(paths):
        unit = load_source_unit_from_file(str(file_path))
        violations = rule.validate(unit)
        logger.debug("Linted %s: %d violation(s)", file_path, len(violations))
        report.files.append(str(file_path))
        report.violations.extend(violations)

    logger.info("Linted %d file(s), found %d violation(s)", len(report.files), len(report.violations))
    return report


def run_correct(
    paths: Iterable[str],
    configuration: SeverityConfiguration | None = None,
    dry_run: bool = False,
) -> list[CorrectionResult]:
    """Rewrite files in place; with ``dry_run`` only report what would change."""
    rule = RedundantTypeAnnotationRule(configuration)
    results: list[CorrectionResult] = []

    for file_path in collect_source_files(paths):
        unit = load_source_unit_from_file(str(file_path))
        if not unit.source.lossless:
            logger.warning("Skipping %s: not valid UTF-8, rewriting it would alter undecodable bytes", file_path)
            continue
        corrected, corrections = rule.correct(unit)
        if not corrections:
            continue
        if not dry_run:
            file_path.write_bytes(corrected.encode("utf-8"))
            logger.debug("Corrected %s (%d change(s))", file_path, len(corrections))
        results.append(CorrectionResult(path=str(file_path), corrections=tuple(corrections)))

    logger.info("Corrected %d file(s)", len(results))
    return results
