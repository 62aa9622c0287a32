"""WordDiffer — the main API.  Tokenize, patience-diff, fold into edits.

Usage:
    from word_diff import WordDiffer, apply_edits

    differ = WordDiffer()          # reusable, keeps no state between calls

    script = differ.diff("foo bar baz", "foo qux baz")
    list(script)                   # [EditEntry(start=4, end=7, replacement='qux')]

    apply_edits("foo bar baz", script)   # "foo qux baz"

Diffing a region of a larger buffer: pass the region's start as ``offset``
and every reported range lands in the outer buffer's coordinates.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .builder import build_edits
from .classifier import CharClassifier
from .sequence import diff_tokens
from .tokenizer import tokenize
from .types import UNITS, EditScript, Token, Unit

logger = logging.getLogger(__name__)


@dataclass
class WordDifferConfig:
    """Configuration for the WordDiffer."""
    ignore_punctuation: bool = False  # fold punctuation into word tokens
    for_completion: bool = True       # reserved; no effect on classification
    unit: Unit = "byte"               # "byte" (UTF-8 offsets) or "char"


class WordDiffer:
    """Word-granularity differ producing edit scripts over the old text."""

    def __init__(self, config: WordDifferConfig | None = None) -> None:
        self.config = config or WordDifferConfig()
        if self.config.unit not in UNITS:
            raise ValueError(f"unknown position unit: {self.config.unit!r}")
        self.classifier = (
            CharClassifier()
            .with_completion(self.config.for_completion)
            .with_ignore_punctuation(self.config.ignore_punctuation)
        )

    def tokenize(self, text: str) -> list[Token]:
        return tokenize(text, self.classifier)

    def diff(self, old_text: str, new_text: str, offset: int = 0) -> EditScript:
        """Compute the edits turning ``old_text`` into ``new_text``.

        Ranges are reported in the old text, shifted by ``offset``.
        """
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")

        old_tokens = self.tokenize(old_text)
        new_tokens = self.tokenize(new_text)
        ops = diff_tokens(old_tokens, new_tokens)
        script = build_edits(ops, offset, unit=self.config.unit)

        logger.debug(
            "diffed %d -> %d tokens into %d op(s), %d edit(s)",
            len(old_tokens), len(new_tokens), len(ops), len(script),
        )
        return script


_default_differ: WordDiffer | None = None


def diff_words(old_text: str, new_text: str, offset: int = 0) -> EditScript:
    """Diff with the default configuration (byte offsets, punctuation kept)."""
    global _default_differ
    if _default_differ is None:
        _default_differ = WordDiffer()
    return _default_differ.diff(old_text, new_text, offset)


def apply_edits(text: str, script: EditScript, offset: int = 0) -> str:
    """Apply ``script`` to the text it was computed from.

    ``offset`` must be the value passed to ``diff``.  Entries are applied
    right-to-left so earlier positions stay valid.
    """
    if script.unit == "byte":
        buf = text.encode("utf-8")
        for entry in sorted(script, key=lambda e: e.start, reverse=True):
            start, end = _local_range(entry.start, entry.end, offset, len(buf))
            buf = buf[:start] + entry.replacement.encode("utf-8") + buf[end:]
        return buf.decode("utf-8")

    result = text
    for entry in sorted(script, key=lambda e: e.start, reverse=True):
        start, end = _local_range(entry.start, entry.end, offset, len(result))
        result = result[:start] + entry.replacement + result[end:]
    return result


def _local_range(start: int, end: int, offset: int, size: int) -> tuple[int, int]:
    local_start, local_end = start - offset, end - offset
    if not 0 <= local_start <= local_end <= size:
        raise ValueError(
            f"edit range [{start}, {end}) is outside the text at offset {offset}"
        )
    return local_start, local_end
