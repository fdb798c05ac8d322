"""
Tree-sitter grammars used by propdoc.

Component sources are TypeScript; ``.tsx`` files need the TSX grammar so that
JSX in examples or implementations parses cleanly.
"""
import logging

import tree_sitter_typescript
from tree_sitter import Language, Parser

logger = logging.getLogger(__name__)

TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())

LANGUAGES = {
    'typescript': TS_LANGUAGE,
    'tsx': TSX_LANGUAGE,
}


def get_parser(language_code: str) -> Parser:
    """
    Create a parser for ``language_code``.

    Raises:
        ValueError: If the language is not supported
    """
    language = LANGUAGES.get(language_code)
    if language is None:
        raise ValueError(f"Unsupported language: {language_code}")
    logger.debug(f"Creating tree-sitter parser for {language_code}")
    return Parser(language)


def language_for_file(file_name: str) -> str:
    """Return the grammar name to use for ``file_name``."""
    return 'tsx' if file_name.lower().endswith('.tsx') else 'typescript'
