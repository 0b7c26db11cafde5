import os

from pydantic import BaseModel, ConfigDict

from swift_lint.models import Severity

SEVERITY_ENV_VAR = "SWIFT_LINT_SEVERITY"


class SeverityConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: Severity = Severity.WARNING


def parse_severity(value: str) -> Severity:
    normalized = value.strip().lower()
    try:
        return Severity(normalized)
    except ValueError:
        valid = sorted(s.value for s in Severity)
        raise ValueError(f"Invalid severity '{value}'. Valid: {valid}") from None


def load_configuration(severity: str | None = None) -> SeverityConfiguration:
    """Build the rule configuration; an explicit severity wins over ``SWIFT_LINT_SEVERITY``."""
    raw = severity or os.getenv(SEVERITY_ENV_VAR)
    if not raw:
        return SeverityConfiguration()
    return SeverityConfiguration(severity=parse_severity(raw))
