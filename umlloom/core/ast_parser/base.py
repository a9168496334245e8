"""Base interface for language-specific AST parsers.

Defines the Strategy pattern base class that language parsers implement.
Shared parsing logic (file reading, tree-sitter invocation, error collection)
lives here; language-specific extraction is delegated.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

import tree_sitter

from .models import CodeUnit, ParseError, ParseResult

logger = logging.getLogger(__name__)


class BaseLanguageParser(ABC):
    """Abstract base for tree-sitter parsers.

    Subclasses implement:
    - get_language(): returns language name string
    - get_tree_sitter_language(): returns tree-sitter Language object
    - extract_package(): returns the compilation unit's package ("" if none)
    - extract_imports(): returns imported names
    - extract_units(): walks the AST and extracts CodeUnit objects
    """

    @abstractmethod
    def get_language(self) -> str:
        ...

    @abstractmethod
    def get_tree_sitter_language(self) -> tree_sitter.Language:
        ...

    @abstractmethod
    def extract_package(self, tree: tree_sitter.Tree, source: bytes) -> str:
        ...

    @abstractmethod
    def extract_imports(self, tree: tree_sitter.Tree, source: bytes) -> List[str]:
        ...

    @abstractmethod
    def extract_units(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str, package: str
    ) -> List[CodeUnit]:
        """Extract code units from a parsed tree-sitter AST.

        Args:
            tree: Parsed tree-sitter tree
            source: Raw source bytes
            file_path: Relative file path within the source root
            package: Package name extracted from the same tree

        Returns:
            List of CodeUnit objects, types before their members
        """
        ...

    def parse_file(self, file_path: str, project_root: str = "") -> ParseResult:
        """Read and parse a source file.

        An unreadable file yields an empty ParseResult carrying an error
        record instead of raising.
        """
        if project_root and file_path.startswith(project_root):
            rel_path = file_path[len(project_root):].lstrip("/\\")
        else:
            rel_path = file_path

        try:
            with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                source_text = f.read()
        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            return ParseResult(
                file_path=rel_path,
                language=self.get_language(),
                package="",
                units=[],
                imports=[],
                errors=[ParseError(file_path=rel_path, line=0, message=str(e), severity="error")],
            )

        return self.parse_source(source_text, rel_path)

    def parse_source(self, source_text: str, file_path: str) -> ParseResult:
        """Parse source code text into a ParseResult."""
        errors: List[ParseError] = []
        source_bytes = source_text.encode("utf-8")
        line_count = source_text.count("\n") + (1 if source_text and not source_text.endswith("\n") else 0)

        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source_bytes)

        if tree.root_node.has_error:
            errors.append(
                ParseError(
                    file_path=file_path,
                    line=0,
                    message="Tree-sitter reported parse errors in file",
                )
            )

        package = self.extract_package(tree, source_bytes)

        try:
            imports = self.extract_imports(tree, source_bytes)
        except Exception as e:
            logger.warning("Failed to extract imports from %s: %s", file_path, e)
            imports = []
            errors.append(ParseError(file_path=file_path, line=0, message=f"Import extraction failed: {e}"))

        try:
            units = self.extract_units(tree, source_bytes, file_path, package)
        except Exception as e:
            logger.error("Failed to extract units from %s: %s", file_path, e)
            units = []
            errors.append(
                ParseError(file_path=file_path, line=0, message=f"Unit extraction failed: {e}", severity="error")
            )

        for unit in units:
            unit.imports = imports

        return ParseResult(
            file_path=file_path,
            language=self.get_language(),
            package=package,
            units=units,
            imports=imports,
            line_count=line_count,
            errors=errors,
        )
