from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class SyntaxKind(str, Enum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    TYPE_IDENTIFIER = "typeidentifier"
    ATTRIBUTE = "attribute"
    COMMENT = "comment"
    DOC_COMMENT = "doccomment"
    STRING = "string"
    NUMBER = "number"


COMMENT_AND_STRING_KINDS = frozenset({SyntaxKind.COMMENT, SyntaxKind.DOC_COMMENT, SyntaxKind.STRING})


class DeclarationKind(str, Enum):
    VAR_GLOBAL = "var.global"
    VAR_INSTANCE = "var.instance"
    VAR_LOCAL = "var.local"
    VAR_STATIC = "var.static"
    VAR_CLASS = "var.class"
    VAR_PARAMETER = "var.parameter"
    CLASS = "class"
    STRUCT = "struct"
    ENUM = "enum"
    EXTENSION = "extension"
    ACTOR = "actor"
    PROTOCOL = "protocol"
    FUNCTION_FREE = "function.free"
    FUNCTION_METHOD = "function.method"
    FUNCTION_CONSTRUCTOR = "function.constructor"
    FUNCTION_DESTRUCTOR = "function.destructor"
    FUNCTION_SUBSCRIPT = "function.subscript"
    TYPEALIAS = "typealias"


VARIABLE_KINDS = frozenset(kind for kind in DeclarationKind if kind.value.startswith("var."))


class TextRange(BaseModel):
    """A span of characters (code points) in a source text."""

    model_config = ConfigDict(frozen=True)

    location: int = Field(ge=0)
    length: int = Field(ge=0)

    @property
    def end(self) -> int:
        return self.location + self.length


class ByteRange(BaseModel):
    """A span of UTF-8 bytes in a source text."""

    model_config = ConfigDict(frozen=True)

    location: int = Field(ge=0)
    length: int = Field(ge=0)

    @property
    def end(self) -> int:
        return self.location + self.length


class SyntaxToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SyntaxKind
    offset: int
    length: int


class DeclarationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DeclarationKind
    attributes: tuple[str, ...] = ()
    byte_range: ByteRange


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str | None = None
    line: int
    character: int

    def __str__(self) -> str:
        return f"{self.file or '<stdin>'}:{self.line}:{self.character}"


class StyleViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str
    rule_name: str
    severity: Severity
    location: Location
    offset: int
    reason: str


class Correction(BaseModel):
    model_config = ConfigDict(frozen=True)

    range: TextRange
    replacement: str = ""


class RuleDescription(BaseModel):
    """Static metadata of a rule, including the examples its tests are driven by.

    A ``↓`` in a triggering example marks the character offset where a violation is expected;
    the marker is stripped before the example is linted.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    name: str
    description: str
    kind: str
    opt_in: bool = False
    non_triggering_examples: tuple[str, ...] = ()
    triggering_examples: tuple[str, ...] = ()
    corrections: dict[str, str] = Field(default_factory=dict)
