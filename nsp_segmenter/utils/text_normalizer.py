"""Text normalization and clause splitting for Chinese text."""

import re


class ChineseTextNormalizer:
    """Normalize Chinese text by cleaning spaces and splitting clauses."""

    # CJK punctuation, kana, unified ideographs, fullwidth forms
    CJK_RANGE = r"[\u3001-\u303f\u3040-\u30ff\u4e00-\u9fff\uff00-\uffef]"

    # Characters that end a clause; kept attached to the clause they close
    CLAUSE_DELIMITERS = "。！？；，、!?;,\n"

    _cjk_gap = re.compile(f"(?<={CJK_RANGE})[ \\t\\u3000]+(?={CJK_RANGE})")
    _space_run = re.compile(r"[ \t\u3000]+")
    _clause = re.compile(
        f"[^{re.escape(CLAUSE_DELIMITERS)}]*[{re.escape(CLAUSE_DELIMITERS)}]+"
        f"|[^{re.escape(CLAUSE_DELIMITERS)}]+"
    )

    @classmethod
    def normalize_spaces(cls, text: str) -> str:
        """
        Remove spaces between CJK characters and collapse other space runs.

        Args:
            text: Input text

        Returns:
            Normalized text
        """
        if not text:
            return text

        text = cls._cjk_gap.sub("", text)
        text = cls._space_run.sub(" ", text)
        return text.strip()

    @classmethod
    def split_clauses(cls, text: str) -> list[tuple[str, int, int]]:
        """
        Split text after clause punctuation.

        Surrounding whitespace is trimmed from each clause and whitespace-only
        pieces are dropped; offsets always index into ``text``.

        Args:
            text: Input text

        Returns:
            List of (clause_text, start_index, end_index) tuples
        """
        if not text:
            return []

        clauses = []
        for match in cls._clause.finditer(text):
            raw = match.group(0)
            stripped = raw.strip()
            if not stripped:
                continue
            start = match.start() + len(raw) - len(raw.lstrip())
            clauses.append((stripped, start, start + len(stripped)))
        return clauses


def normalize_chinese_text(text: str) -> str:
    """
    Convenience function for normalizing Chinese text.

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    return ChineseTextNormalizer.normalize_spaces(text)


def split_clauses(text: str) -> list[tuple[str, int, int]]:
    """Convenience wrapper for ``ChineseTextNormalizer.split_clauses``."""
    return ChineseTextNormalizer.split_clauses(text)
