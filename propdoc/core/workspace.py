import logging
from pathlib import Path
from typing import Iterable, List, Optional

from propdoc.core.config import config
from propdoc.main import PropDoc
from propdoc.models.records import DeclarationRecord

logger = logging.getLogger(__name__)


class Workspace:
    """Component source directory and documentation generation driver."""

    def __init__(self, root: str):
        self.root = Path(root)
        self.propdoc = PropDoc()

    @classmethod
    def open(cls, root: str) -> "Workspace":
        ws = cls(root)
        if not ws.root.is_dir():
            raise FileNotFoundError(f"Source directory not found: {root}")
        return ws

    def component_files(self, names: Optional[Iterable[str]] = None) -> List[Path]:
        """Return component sources, optionally restricted to ``names``."""
        extensions = set(config.get('source', 'extensions'))
        excluded = set(config.get('source', 'exclude'))
        wanted = set(names or [])
        files = []
        for path in sorted(self.root.iterdir()):
            if not path.is_file() or path.suffix not in extensions:
                continue
            if path.stem in excluded:
                continue
            if wanted and path.stem not in wanted:
                continue
            files.append(path)
        return files

    def parse(self, path: Path) -> DeclarationRecord:
        return self.propdoc.parse_file(str(path))

    def parse_all(self, names: Optional[Iterable[str]] = None) -> List[DeclarationRecord]:
        return [self.parse(path) for path in self.component_files(names)]

    def generate(self, out_dir: str, names: Optional[Iterable[str]] = None) -> List[Path]:
        """
        Write one page per component into ``out_dir``.

        All sources are parsed before anything is written, so a parse failure
        leaves ``out_dir`` untouched.
        """
        return self.write_pages(out_dir, self.parse_all(names))

    def write_pages(self, out_dir: str, records: List[DeclarationRecord]) -> List[Path]:
        out_root = Path(out_dir)
        if records:
            out_root.mkdir(parents=True, exist_ok=True)
        written = []
        for record in records:
            out_path = out_root / f"{record.name}{config.get('output', 'extension')}"
            out_path.write_text(self.propdoc.render(record), encoding="utf8")
            logger.info(f"Wrote {out_path}")
            written.append(out_path)
        return written
