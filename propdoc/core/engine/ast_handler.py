"""
AST Handler for propdoc providing a unified interface for tree-sitter operations.
"""
import logging
from functools import lru_cache
from typing import Tuple, List, Optional

from tree_sitter import Node

from propdoc.core.config import config
from propdoc.core.engine.languages import LANGUAGES, get_parser
from propdoc.core.error_handling import SourceSyntaxError
from propdoc.core.utils.hashing import sha1_code

logger = logging.getLogger(__name__)

COMMENT_NODE = 'comment'


class ASTHandler:
    """
    Handles syntax tree operations using tree-sitter.
    Provides parsing, node text access and comment association for one grammar.
    """

    def __init__(self, language_code: str = 'typescript'):
        """
        Initialize the AST handler.

        Args:
            language_code: Grammar name, 'typescript' or 'tsx'
        """
        self.language_code = language_code
        self.parser = get_parser(language_code)
        self.language = LANGUAGES[language_code]

    @lru_cache(maxsize=config.get('parsing', 'cache_size', 128))
    def _parse_cached(self, code_hash: str, code: str) -> Tuple[Node, bytes]:
        """Internal cached parse implementation."""
        code_bytes = code.encode("utf8")
        tree = self.parser.parse(code_bytes)
        return (tree.root_node, code_bytes)

    def parse(self, code: str) -> Tuple[Node, bytes]:
        """
        Parse source code into a syntax tree. Results are cached using an LRU
        cache keyed by the SHA1 hash of ``code``.

        Args:
            code: Source code as string

        Returns:
            Tuple of (root_node, code_bytes)

        Raises:
            SourceSyntaxError: If the tree contains error or missing nodes
        """
        root, code_bytes = self._parse_cached(sha1_code(code), code)
        if root.has_error:
            error_node = self.find_error_node(root)
            line, column = (error_node.start_point[0] + 1, error_node.start_point[1]) if error_node else (None, None)
            snippet = self.get_node_text(error_node, code_bytes)[:80] if error_node else None
            logger.error(f"Syntax error in {self.language_code} source at line {line}, column {column}")
            raise SourceSyntaxError(
                "Source could not be parsed",
                language=self.language_code,
                code_snippet=snippet,
                line=line,
                column=column,
            )
        return root, code_bytes

    @staticmethod
    def find_error_node(node: Node) -> Optional[Node]:
        """Return the first ERROR or missing node below ``node`` in source order."""
        if node.type == 'ERROR' or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = ASTHandler.find_error_node(child)
                if found is not None:
                    return found
        return None

    def get_node_text(self, node: Node, code_bytes: bytes) -> str:
        """
        Get the text content of a node.

        Args:
            node: Tree-sitter node
            code_bytes: Source code as bytes

        Returns:
            String content of the node
        """
        return code_bytes[node.start_byte:node.end_byte].decode('utf8')

    def find_child_by_field_name(self, node: Node, field_name: str) -> Optional[Node]:
        """
        Find a child node by field name.

        Args:
            node: Parent node
            field_name: Field name to find

        Returns:
            Child node or None if not found
        """
        if node is None:
            return None
        return node.child_by_field_name(field_name)

    def has_child_of_type(self, node: Node, child_type: str) -> bool:
        """Check whether any direct child (named or anonymous) has ``child_type``."""
        return any(child.type == child_type for child in node.children)

    def get_leading_comments(self, node: Node, code_bytes: bytes) -> List[str]:
        """
        Return the comments immediately preceding ``node``, earliest first.

        Comments are extras in tree-sitter and end up as siblings of the node
        they precede. The walk goes backward through contiguous comment
        siblings only; any other sibling ends it. Block comments already read
        as part of the previous member's type are left out.

        Args:
            node: Node whose leading comments are wanted
            code_bytes: Source code as bytes

        Returns:
            Raw comment texts, delimiters included. Empty when there are none.
        """
        comments = []
        sibling = node.prev_sibling
        while sibling is not None and sibling.type == COMMENT_NODE:
            comments.append(sibling)
            sibling = sibling.prev_sibling
        consumed_end = self._type_comments_end(sibling)
        return [self.get_node_text(comment, code_bytes)
                for comment in reversed(comments) if comment.start_byte >= consumed_end]

    def _type_comments_end(self, node: Optional[Node]) -> int:
        """End byte of the trailing comments read together with ``node``'s type, or -1."""
        annotation = self.find_child_by_field_name(node, 'type')
        if annotation is None:
            return -1
        return self.get_trailing_block_comments_end(annotation, node)

    def get_trailing_block_comments_end(self, type_node: Node, owner: Node) -> int:
        """
        Return the end byte of ``type_node`` extended over block comments that
        follow it on the same line.

        Tree-sitter moves trailing extras out of the reduced node, so such a
        comment is a sibling of ``type_node`` or of its ``owner`` declaration.

        Args:
            type_node: Node holding the declared type
            owner: The declaration the type belongs to

        Returns:
            End byte offset to read the type text up to
        """
        end_byte = type_node.end_byte
        row = type_node.end_point[0]
        for start in (type_node.next_sibling, owner.next_sibling):
            sibling = start
            while (sibling is not None and sibling.type == COMMENT_NODE
                   and sibling.start_point[0] == row and sibling.start_byte >= end_byte):
                if not sibling.text.startswith(b'/*'):
                    break
                end_byte = sibling.end_byte
                sibling = sibling.next_sibling
        return end_byte
