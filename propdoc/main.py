import os
import logging
from typing import Dict

from .core.config import config
from .core.engine.ast_handler import ASTHandler
from .core.engine.languages import language_for_file
from .core.error_handling import wrap_extraction_errors
from .core.input_validation import validate_params
from .extractors.declaration_aggregator import aggregate_declaration
from .extractors.event_reconciler import reconcile_events
from .models.records import DeclarationRecord
from .rendering.markdown import render_declaration

logger = logging.getLogger(__name__)


class PropDoc:
    """
    Main entry point for propdoc.
    Turns annotated component sources into declaration records and pages.
    """

    def __init__(self):
        self._handlers: Dict[str, ASTHandler] = {}

    def _get_ast_handler(self, language_code: str) -> ASTHandler:
        if language_code not in self._handlers:
            logger.debug(f"Creating AST handler for {language_code}")
            self._handlers[language_code] = ASTHandler(language_code)
        return self._handlers[language_code]

    @validate_params(
        name={"type": str, "not_empty": True},
        code={"type": str},
    )
    def parse(self, name: str, code: str, tsx: bool = False) -> DeclarationRecord:
        """
        Extract the documentation record of one component.

        Args:
            name: Component name, usually the file's base name
            code: Source text of the component file
            tsx: Parse with the TSX grammar

        Returns:
            Reconciled DeclarationRecord

        Raises:
            SourceSyntaxError: If the source does not parse
        """
        ast_handler = self._get_ast_handler('tsx' if tsx else 'typescript')
        root, code_bytes = ast_handler.parse(code)
        record, mapping = aggregate_declaration(name, root, code_bytes, ast_handler)
        reconcile_events(record, mapping)
        logger.info(
            f"Parsed {name}: {len(record.all_properties)} properties, {len(mapping)} mapped events"
        )
        return record

    @wrap_extraction_errors
    def parse_file(self, file_path: str) -> DeclarationRecord:
        """Parse a component file; its base name becomes the record name."""
        name = os.path.splitext(os.path.basename(file_path))[0]
        code = self.load_file(file_path)
        return self.parse(name, code, tsx=language_for_file(file_path) == 'tsx')

    @staticmethod
    def render(record: DeclarationRecord) -> str:
        """Render the MDX page of ``record``."""
        return render_declaration(record)

    @staticmethod
    def load_file(file_path: str) -> str:
        """
        Load content from a file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")
        with open(file_path, "r", encoding=config.get("source", "encoding", "utf-8")) as f:
            return f.read()
