"""Java AST parser using tree-sitter.

Walks the tree-sitter AST to extract classes, records, interfaces, enums,
annotation types (nested at any depth), their methods, constructors and
fields, plus the package and import declarations of the compilation unit.
"""

import logging
from typing import Iterator, List, Optional, Tuple

import tree_sitter
import tree_sitter_java

from .base import BaseLanguageParser
from .models import CodeUnit, ParsedParameter

logger = logging.getLogger(__name__)

_JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

# tree-sitter node type -> unit_type
_TYPE_DECLARATIONS = {
    "class_declaration": "class",
    "record_declaration": "class",
    "interface_declaration": "interface",
    "enum_declaration": "enum",
    "annotation_type_declaration": "annotation",
}

_ANNOTATION_NODES = ("marker_annotation", "annotation")


class JavaParser(BaseLanguageParser):
    """tree-sitter based Java parser.

    Extracts:
    - Class and record declarations -> unit_type="class"
    - Interface declarations -> unit_type="interface"
    - Enum declarations -> unit_type="enum"
    - Annotation type declarations -> unit_type="annotation"
    - Method declarations -> unit_type="method"
    - Constructor declarations -> unit_type="constructor"
    - Field declarations and record components -> unit_type="field"
    """

    def get_language(self) -> str:
        return "java"

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _JAVA_LANGUAGE

    def extract_package(self, tree: tree_sitter.Tree, source: bytes) -> str:
        for child in tree.root_node.children:
            if child.type == "package_declaration":
                # package com.example.foo;
                text = _text(child, source).strip()
                return text.replace("package", "", 1).rstrip(";").strip()
        return ""

    def extract_imports(self, tree: tree_sitter.Tree, source: bytes) -> List[str]:
        """Extract single-type and on-demand type imports.

        Static imports bring in members rather than types and are skipped.
        """
        imports = []
        for child in tree.root_node.children:
            if child.type != "import_declaration":
                continue
            text = _text(child, source).strip().rstrip(";").strip()
            words = text.split()
            if len(words) < 2 or words[1] == "static":
                continue
            imports.append("".join(words[1:]))
        return imports

    def extract_units(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str, package: str
    ) -> List[CodeUnit]:
        units: List[CodeUnit] = []
        for child in tree.root_node.children:
            if child.type in _TYPE_DECLARATIONS:
                units.extend(self._extract_type(child, source, file_path, package))
        return units

    # =========================================================================
    # Type declarations
    # =========================================================================

    def _extract_type(
        self,
        node: tree_sitter.Node,
        source: bytes,
        file_path: str,
        package: str,
        enclosing: Optional[str] = None,
    ) -> List[CodeUnit]:
        """Extract a type declaration, its members and its nested types."""
        name = _child_text(node, "name", source)
        if not name:
            return []

        if enclosing:
            qualified_name = f"{enclosing}.{name}"
        else:
            qualified_name = f"{package}.{name}" if package else name

        unit_type = _TYPE_DECLARATIONS[node.type]
        modifiers, annotations = self._extract_modifiers(node, source)
        docstring = self._extract_javadoc(node, source)
        description, tags = _split_javadoc(docstring)

        extends, implements = self._extract_inheritance(node, source)

        type_unit = CodeUnit(
            unit_type=unit_type,
            name=name,
            qualified_name=qualified_name,
            package=package,
            file_path=file_path,
            start_line=node.start_point.row + 1,
            end_line=node.end_point.row + 1,
            signature=self._extract_type_signature(node, source),
            docstring=description,
            parent_name=enclosing,
            modifiers=modifiers,
            annotations=annotations,
            type_parameters=self._extract_type_parameters(node, source),
            extends=extends,
            implements=implements,
            tags=tags,
        )
        if node.type == "record_declaration":
            type_unit.metadata["record"] = True
        units = [type_unit]

        if node.type == "record_declaration":
            for param in self._extract_parameters(node, source):
                units.append(self._member_unit(
                    "field", param.name, node, source, file_path, package, qualified_name,
                    modifiers=["private", "final"], return_type=param.type,
                ))

        body = node.child_by_field_name("body")
        if body is None:
            return units

        nested: List[CodeUnit] = []
        for child in _body_members(body):
            if child.type == "method_declaration":
                units.append(self._extract_method(child, source, file_path, package, type_unit))
            elif child.type == "constructor_declaration":
                units.append(self._extract_constructor(child, source, file_path, package, type_unit))
            elif child.type in ("field_declaration", "constant_declaration"):
                units.extend(self._extract_fields(child, source, file_path, package, type_unit))
            elif child.type in _TYPE_DECLARATIONS:
                nested.extend(self._extract_type(child, source, file_path, package, enclosing=qualified_name))

        # Nested types come after all members of their enclosing type
        return units + nested

    # =========================================================================
    # Member declarations
    # =========================================================================

    def _extract_method(
        self,
        node: tree_sitter.Node,
        source: bytes,
        file_path: str,
        package: str,
        owner: CodeUnit,
    ) -> CodeUnit:
        name = _child_text(node, "name", source) or "?"
        modifiers, annotations = self._extract_modifiers(node, source)
        unit = self._member_unit(
            "method", name, node, source, file_path, package, owner.qualified_name,
            modifiers=modifiers,
            return_type=_child_text(node, "type", source),
        )
        unit.annotations = annotations
        unit.parameters = self._extract_parameters(node, source)
        unit.type_parameters = self._extract_type_parameters(node, source)
        unit.has_body = node.child_by_field_name("body") is not None
        unit.docstring = _split_javadoc(self._extract_javadoc(node, source))[0]
        return unit

    def _extract_constructor(
        self,
        node: tree_sitter.Node,
        source: bytes,
        file_path: str,
        package: str,
        owner: CodeUnit,
    ) -> CodeUnit:
        modifiers, annotations = self._extract_modifiers(node, source)
        unit = self._member_unit(
            "constructor", owner.name, node, source, file_path, package, owner.qualified_name,
            modifiers=modifiers,
        )
        unit.annotations = annotations
        unit.parameters = self._extract_parameters(node, source)
        return unit

    def _extract_fields(
        self,
        node: tree_sitter.Node,
        source: bytes,
        file_path: str,
        package: str,
        owner: CodeUnit,
    ) -> List[CodeUnit]:
        """One field unit per declarator: ``int x, y;`` yields two fields."""
        modifiers, _ = self._extract_modifiers(node, source)
        if owner.unit_type == "interface" or node.type == "constant_declaration":
            # Interface fields are implicitly public static final
            modifiers = list(dict.fromkeys(["public", "static", "final"] + modifiers))
        field_type = _child_text(node, "type", source) or "?"

        fields = []
        for declarator in node.children_by_field_name("declarator"):
            name = _child_text(declarator, "name", source)
            if not name:
                continue
            dims = _child_text(declarator, "dimensions", source) or ""
            fields.append(self._member_unit(
                "field", name, node, source, file_path, package, owner.qualified_name,
                modifiers=modifiers, return_type=field_type + dims,
            ))
        return fields

    def _member_unit(
        self,
        unit_type: str,
        name: str,
        node: tree_sitter.Node,
        source: bytes,
        file_path: str,
        package: str,
        owner_qualified_name: str,
        modifiers: Optional[List[str]] = None,
        return_type: Optional[str] = None,
    ) -> CodeUnit:
        return CodeUnit(
            unit_type=unit_type,
            name=name,
            qualified_name=f"{owner_qualified_name}.{name}",
            package=package,
            file_path=file_path,
            start_line=node.start_point.row + 1,
            end_line=node.end_point.row + 1,
            signature=self._extract_method_signature(node, source),
            parent_name=owner_qualified_name,
            modifiers=modifiers or [],
            return_type=return_type,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _extract_modifiers(node: tree_sitter.Node, source: bytes) -> Tuple[List[str], List[str]]:
        """Return (keyword modifiers, annotations) of a declaration."""
        modifiers: List[str] = []
        annotations: List[str] = []
        for child in node.children:
            if child.type != "modifiers":
                continue
            for mod in child.children:
                if mod.type in ("line_comment", "block_comment"):
                    continue
                if mod.type in _ANNOTATION_NODES:
                    annotations.append(_text(mod, source).strip())
                else:
                    modifiers.append(_text(mod, source).strip())
        return modifiers, annotations

    @staticmethod
    def _extract_type_parameters(node: tree_sitter.Node, source: bytes) -> List[str]:
        params_node = node.child_by_field_name("type_parameters")
        if params_node is None:
            return []
        return [_text(p, source).strip() for p in params_node.named_children if p.type == "type_parameter"]

    @staticmethod
    def _extract_parameters(node: tree_sitter.Node, source: bytes) -> List[ParsedParameter]:
        """Extract formal parameters; varargs are reported with an array type."""
        params_node = node.child_by_field_name("parameters")
        if params_node is None:
            return []

        params = []
        for child in params_node.named_children:
            if child.type == "formal_parameter":
                name = _child_text(child, "name", source) or "?"
                type_text = _child_text(child, "type", source) or "?"
                dims = _child_text(child, "dimensions", source) or ""
                params.append(ParsedParameter(name=name, type=type_text + dims))
            elif child.type == "spread_parameter":
                type_text, name = "?", "?"
                for sub in child.named_children:
                    if sub.type == "variable_declarator":
                        name = _child_text(sub, "name", source) or name
                    elif sub.type != "modifiers" and sub.type not in _ANNOTATION_NODES and type_text == "?":
                        type_text = _text(sub, source).strip()
                params.append(ParsedParameter(name=name, type=f"{type_text}[]", varargs=True))
        return params

    @staticmethod
    def _extract_inheritance(node: tree_sitter.Node, source: bytes) -> Tuple[List[str], List[str]]:
        """Extract extends and implements clauses as written.

        Interfaces list their super-interfaces under ``extends``.
        """
        extends: List[str] = []
        implements: List[str] = []

        for child in node.children:
            if child.type == "superclass":
                for sub in child.named_children:
                    extends.append(_text(sub, source).strip())
                    break
            elif child.type in ("super_interfaces", "extends_interfaces"):
                target = implements if child.type == "super_interfaces" else extends
                for sub in child.named_children:
                    if sub.type == "type_list":
                        target.extend(_text(t, source).strip() for t in sub.named_children)

        return extends, implements

    @staticmethod
    def _extract_type_signature(node: tree_sitter.Node, source: bytes) -> str:
        """Type declaration header up to the opening brace."""
        text = _text(node, source)
        return text.split("{", 1)[0].strip()

    @staticmethod
    def _extract_method_signature(node: tree_sitter.Node, source: bytes) -> str:
        """Declaration text up to the body or terminating semicolon."""
        text = _text(node, source)
        for i, char in enumerate(text):
            if char in "{;=":
                return " ".join(text[:i].split())
        return " ".join(text.split("\n")[0].split())

    @staticmethod
    def _extract_javadoc(node: tree_sitter.Node, source: bytes) -> Optional[str]:
        """Extract the Javadoc comment preceding a node, markers stripped."""
        prev = node.prev_named_sibling
        if prev is None or prev.type != "block_comment":
            return None
        text = _text(prev, source).strip()
        if not text.startswith("/**"):
            return None
        content = text[3:]
        if content.endswith("*/"):
            content = content[:-2]
        lines = []
        for line in content.split("\n"):
            stripped = line.strip()
            if stripped.startswith("* "):
                lines.append(stripped[2:])
            elif stripped.startswith("*"):
                lines.append(stripped[1:].strip())
            else:
                lines.append(stripped)
        return "\n".join(lines).strip()


def _text(node: tree_sitter.Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _child_text(node: tree_sitter.Node, field_name: str, source: bytes) -> Optional[str]:
    child = node.child_by_field_name(field_name)
    if child is None:
        return None
    return _text(child, source).strip()


def _body_members(body: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Member declarations of a class, interface, enum or annotation body."""
    for child in body.named_children:
        if child.type == "enum_body_declarations":
            yield from child.named_children
        else:
            yield child


def _split_javadoc(docstring: Optional[str]) -> Tuple[Optional[str], List[Tuple[str, str]]]:
    """Split Javadoc text into its description and its block tags.

    ``@assoc 1 has * Item`` -> ("assoc", "1 has * Item"). Continuation lines
    of a tag are folded into the tag text.
    """
    if not docstring:
        return docstring, []

    description: List[str] = []
    tags: List[Tuple[str, str]] = []
    for line in docstring.split("\n"):
        stripped = line.strip()
        if stripped.startswith("@") and len(stripped) > 1:
            name, _, text = stripped[1:].partition(" ")
            tags.append((name, text.strip()))
        elif tags and stripped:
            name, text = tags[-1]
            tags[-1] = (name, f"{text} {stripped}".strip())
        elif not tags:
            description.append(line)

    return ("\n".join(description).strip() or None), tags
