from typing import Protocol

from swift_lint.models import DeclarationInfo


class SyntaxStructure(Protocol):
    def declaration_info(self, byte_offset: int) -> DeclarationInfo | None: ...
