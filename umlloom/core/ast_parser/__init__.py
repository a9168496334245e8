"""umlloom AST Parser - tree-sitter based Java source parsing.

Public API:
    parse_file(path, project_root) -> ParseResult
    parse_source(source, file_path, language) -> ParseResult
    parse_directory(root) -> list[ParseResult]
    detect_language(file_path) -> str | None
"""

import logging
from typing import List

from .models import CodeUnit, ParsedParameter, ParseError, ParseResult
from .utils import detect_language, get_parser, is_supported_file, iter_source_files, should_skip_directory

logger = logging.getLogger(__name__)

__all__ = [
    "parse_file",
    "parse_source",
    "parse_directory",
    "detect_language",
    "is_supported_file",
    "iter_source_files",
    "should_skip_directory",
    "CodeUnit",
    "ParsedParameter",
    "ParseError",
    "ParseResult",
]


def parse_file(file_path: str, project_root: str = "") -> ParseResult:
    """Parse a source file into structured code units.

    Raises:
        ValueError: If the file extension is not supported
    """
    language = detect_language(file_path)
    if language is None:
        raise ValueError(f"Unsupported source file: {file_path}")
    return get_parser(language).parse_file(file_path, project_root)


def parse_source(source_text: str, file_path: str, language: str | None = None) -> ParseResult:
    """Parse source code string into structured code units.

    Args:
        source_text: Source code as string
        file_path: Relative file path (for metadata)
        language: Language identifier. If None, detected from file_path.
    """
    if language is None:
        language = detect_language(file_path)
    if language is None:
        raise ValueError(f"Cannot detect language of {file_path}")
    return get_parser(language).parse_source(source_text, file_path)


def parse_directory(root: str) -> List[ParseResult]:
    """Parse every supported source file below ``root``."""
    results = []
    for path in iter_source_files(root):
        result = parse_file(path, root)
        for error in result.errors:
            logger.warning("%s:%d: %s", error.file_path, error.line, error.message)
        results.append(result)
    logger.info("Parsed %d source files under %s", len(results), root)
    return results
