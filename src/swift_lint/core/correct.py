import logging
from collections.abc import Iterable

from swift_lint.models import Correction

logger = logging.getLogger(__name__)


def apply_corrections(text: str, corrections: Iterable[Correction]) -> str:
    """Apply corrections back to front so earlier offsets stay valid.

    A correction overlapping one that was already applied is skipped.
    """
    ordered = sorted(corrections, key=lambda c: (c.range.location, c.range.length), reverse=True)
    result = text
    applied_start: int | None = None
    for correction in ordered:
        text_range = correction.range
        if text_range.end > len(text):
            raise ValueError(
                f"Correction range {text_range.location}+{text_range.length} exceeds text length {len(text)}"
            )
        if applied_start is not None and text_range.end > applied_start:
            logger.debug("Skipping overlapping correction at offset %d", text_range.location)
            continue
        result = result[: text_range.location] + correction.replacement + result[text_range.end :]
        applied_start = text_range.location
    return result
