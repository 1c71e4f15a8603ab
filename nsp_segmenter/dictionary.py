"""Dictionary loading."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_dictionary_lines(lines) -> set[str]:
    """Collect words from dictionary text lines.

    Blank lines and lines starting with ``#`` are skipped. Only the first
    whitespace-separated field is kept, so jieba-style ``word freq tag``
    lines work as-is.
    """
    words = set()
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.add(line.split()[0])
    return words


def load_dictionary(path: str | Path) -> frozenset[str]:
    """Load a dictionary file.

    Args:
        path: Text file with one entry per line, or a ``.json`` file holding
            a list of words

    Returns:
        Frozen set of words

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a JSON dictionary is not a list of strings
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary not found: {path}")

    if path.suffix.lower() == ".json":
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"JSON dictionary must be a list of strings: {path}")
        words = {w.strip() for w in data if w.strip()}
    else:
        with open(path, "r", encoding="utf-8") as f:
            words = parse_dictionary_lines(f)

    logger.info(f"Loaded {len(words)} dictionary entries from {path}")
    return frozenset(words)
