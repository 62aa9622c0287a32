"""Split text into maximal runs of same-class characters.

Word and whitespace runs merge across any characters of their class.
Punctuation only merges across repeats of the same character, so ``===``
is one token while ``a+b`` and ``()`` split at every character.
"""

from __future__ import annotations

from .classifier import CharClassifier
from .types import CharKind, Token

DEFAULT_CLASSIFIER = CharClassifier().with_completion(True)


def tokenize(text: str, classifier: CharClassifier | None = None) -> list[Token]:
    """Return tokens that exactly tile ``text``.

    Always returns at least one token: the empty string yields a single
    empty token.
    """
    classifier = classifier or DEFAULT_CLASSIFIER
    tokens: list[Token] = []
    start = 0
    prev_ch = text[0] if text else None
    prev_kind = classifier.kind(prev_ch) if prev_ch is not None else None

    for end, ch in enumerate(text):
        kind = classifier.kind(ch)
        if kind != prev_kind or (kind == CharKind.PUNCTUATION and ch != prev_ch):
            tokens.append(Token(text, start, end))
            start = end
        prev_ch = ch
        prev_kind = kind

    tokens.append(Token(text, start, len(text)))
    return tokens
