import re

from tree_sitter import Node

from swift_lint.models import ByteRange, DeclarationInfo, DeclarationKind

_TYPE_DECLARATION_KINDS = {
    "class": DeclarationKind.CLASS,
    "struct": DeclarationKind.STRUCT,
    "enum": DeclarationKind.ENUM,
    "extension": DeclarationKind.EXTENSION,
    "actor": DeclarationKind.ACTOR,
}

_FIXED_DECLARATION_KINDS = {
    "protocol_declaration": DeclarationKind.PROTOCOL,
    "protocol_property_declaration": DeclarationKind.VAR_INSTANCE,
    "init_declaration": DeclarationKind.FUNCTION_CONSTRUCTOR,
    "deinit_declaration": DeclarationKind.FUNCTION_DESTRUCTOR,
    "subscript_declaration": DeclarationKind.FUNCTION_SUBSCRIPT,
    "typealias_declaration": DeclarationKind.TYPEALIAS,
    "parameter": DeclarationKind.VAR_PARAMETER,
}

_TYPE_BODY_DECLARATIONS = frozenset({"class_declaration", "protocol_declaration"})
_LOCAL_SCOPES = frozenset(
    {"function_declaration", "init_declaration", "deinit_declaration", "lambda_literal", "computed_property"}
)
_ATTRIBUTE_NAME = re.compile(r"@\s*([\w.]+)")
_STATIC_MODIFIER = re.compile(rb"\bstatic\b")
_CLASS_MODIFIER = re.compile(rb"\bclass\b")


def _text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _type_declaration_kind(node: Node) -> DeclarationKind:
    for child in node.children:
        kind = _TYPE_DECLARATION_KINDS.get(child.type)
        if kind is not None:
            return kind
    return DeclarationKind.CLASS


def _modifiers(node: Node) -> list[Node]:
    return [child for child in node.children if child.type in ("modifiers", "property_modifier")]


def _property_kind(node: Node, source_bytes: bytes) -> DeclarationKind:
    parent = node.parent
    while parent is not None:
        if parent.type in _LOCAL_SCOPES:
            return DeclarationKind.VAR_LOCAL
        if parent.type in _TYPE_BODY_DECLARATIONS:
            for modifiers in _modifiers(node):
                modifier_text = source_bytes[modifiers.start_byte : modifiers.end_byte]
                if _STATIC_MODIFIER.search(modifier_text):
                    return DeclarationKind.VAR_STATIC
                if _CLASS_MODIFIER.search(modifier_text):
                    return DeclarationKind.VAR_CLASS
            return DeclarationKind.VAR_INSTANCE
        parent = parent.parent
    return DeclarationKind.VAR_GLOBAL


def _function_kind(node: Node) -> DeclarationKind:
    parent = node.parent
    while parent is not None:
        if parent.type in _TYPE_BODY_DECLARATIONS:
            return DeclarationKind.FUNCTION_METHOD
        if parent.type in _LOCAL_SCOPES:
            break
        parent = parent.parent
    return DeclarationKind.FUNCTION_FREE


def _attributes(node: Node, source_bytes: bytes) -> tuple[str, ...]:
    # local declarations carry their attributes without a modifiers wrapper
    attribute_nodes = [child for child in node.children if child.type == "attribute"]
    for modifiers in _modifiers(node):
        attribute_nodes.extend(child for child in modifiers.children if child.type == "attribute")

    names: list[str] = []
    for attribute in sorted(attribute_nodes, key=lambda n: n.start_byte):
        found = _ATTRIBUTE_NAME.match(_text(attribute, source_bytes))
        if found:
            names.append(found.group(1))
    return tuple(names)


class TreeSitterStructure:
    """Declaration lookup over a parsed Swift tree.

    Implements the ``SyntaxStructure`` protocol.
    """

    def __init__(self, root: Node, source_bytes: bytes) -> None:
        self._root = root
        self._source_bytes = source_bytes

    def _declaration_kind(self, node: Node) -> DeclarationKind | None:
        if node.type == "property_declaration":
            return _property_kind(node, self._source_bytes)
        if node.type == "class_declaration":
            return _type_declaration_kind(node)
        if node.type == "function_declaration":
            return _function_kind(node)
        return _FIXED_DECLARATION_KINDS.get(node.type)

    def declaration_info(self, byte_offset: int) -> DeclarationInfo | None:
        if byte_offset < 0 or byte_offset > len(self._source_bytes):
            return None
        end = min(byte_offset + 1, len(self._source_bytes))
        node: Node | None = self._root.descendant_for_byte_range(byte_offset, end)
        while node is not None:
            kind = self._declaration_kind(node)
            if kind is not None:
                return DeclarationInfo(
                    kind=kind,
                    attributes=_attributes(node, self._source_bytes),
                    byte_range=ByteRange(location=node.start_byte, length=node.end_byte - node.start_byte),
                )
            node = node.parent
        return None
