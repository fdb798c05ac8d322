"""
Comment normalization.

Turns one raw comment (``// ...``, ``/* ... */`` or ``/** ... */``) into the
text lines it carries, so that tag classification does not depend on the
comment style an author picked.
"""
import re
from typing import List

_LINE_OPENER = re.compile(r'^//+ ?')
_BLOCK_OPENER = re.compile(r'^/\*\*? ?')
_BLOCK_CLOSER = re.compile(r'\s*\*/$')
_LINE_MARKER = re.compile(r'^\s*\*(?!/) ?')


def is_block_comment(raw: str) -> bool:
    return raw.lstrip().startswith('/*')


def normalize_comment(raw: str) -> List[str]:
    """
    Strip comment delimiters and per-line markers from ``raw``.

    Args:
        raw: Comment text as it appears in the source

    Returns:
        Right-trimmed text lines. A blank first or last line produced by
        delimiter placement is dropped; interior blank lines are kept.
    """
    text = raw.strip()
    if not is_block_comment(text):
        lines = [_LINE_OPENER.sub('', line.strip()) for line in text.splitlines()]
    else:
        lines = text.splitlines() or ['']
        last = len(lines) - 1
        cleaned = []
        for index, line in enumerate(lines):
            line = line.rstrip()
            # closer first so that `/**/` does not leave its slash behind
            if index == last:
                line = _BLOCK_CLOSER.sub('', line)
            if index == 0:
                line = _BLOCK_OPENER.sub('', line)
            else:
                line = _LINE_MARKER.sub('', line)
            cleaned.append(line)
        lines = cleaned

    lines = [line.rstrip() for line in lines]
    if lines and not lines[-1].strip():
        lines.pop()
    if lines and not lines[0].strip():
        lines.pop(0)
    return lines


def normalize_comments(raw_comments: List[str]) -> List[List[str]]:
    """Normalize each raw comment, keeping one line list per comment block."""
    return [normalize_comment(raw) for raw in raw_comments]
