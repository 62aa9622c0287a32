"""Character classifier — decides which characters belong to the same token.

Three classes:
  - whitespace:  the Unicode White_Space property
  - word:        Alphabetic or Numeric characters, and ``_``
  - punctuation: everything else, or word when ``ignore_punctuation`` is set
"""

from __future__ import annotations
from dataclasses import dataclass, replace

import regex

from .types import CharKind

_WHITESPACE = regex.compile(r"\p{White_Space}")
_WORD = regex.compile(r"[\p{Alphabetic}\p{N}_]")


@dataclass(frozen=True, slots=True)
class CharClassifier:
    """Immutable classifier.  Configure with the ``with_*`` builders.

    ``for_completion`` is carried for scope-aware word characters (e.g.
    treating ``-`` as part of a word in some languages).  No scope is ever
    attached, so the flag currently has no effect on classification.
    """
    for_completion: bool = False
    ignore_punctuation: bool = False

    def with_completion(self, for_completion: bool) -> "CharClassifier":
        return replace(self, for_completion=for_completion)

    def with_ignore_punctuation(self, ignore_punctuation: bool) -> "CharClassifier":
        return replace(self, ignore_punctuation=ignore_punctuation)

    def kind_with(self, c: str, ignore_punctuation: bool) -> CharKind:
        """Classify ``c``, overriding the configured punctuation handling."""
        if _WHITESPACE.match(c):
            return CharKind.WHITESPACE
        if _WORD.match(c):
            return CharKind.WORD
        return CharKind.WORD if ignore_punctuation else CharKind.PUNCTUATION

    def kind(self, c: str) -> CharKind:
        return self.kind_with(c, self.ignore_punctuation)

    def is_whitespace(self, c: str) -> bool:
        return self.kind(c) == CharKind.WHITESPACE

    def is_word(self, c: str) -> bool:
        return self.kind(c) == CharKind.WORD

    def is_punctuation(self, c: str) -> bool:
        return self.kind(c) == CharKind.PUNCTUATION
