from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from swift_lint.models import SyntaxKind, TextRange


class PatternMatcher(Protocol):
    def match(
        self,
        pattern: str,
        kinds: Sequence[SyntaxKind] | None = None,
        excluding_kinds: Iterable[SyntaxKind] | None = None,
        within: TextRange | None = None,
    ) -> Iterator[TextRange]: ...
