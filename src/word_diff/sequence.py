"""Sequence differ — patience anchors with an LCS fallback.

Patience diff (via ``patiencediff``) only matches elements that are unique
on both sides, then recurses between those anchors.  That keeps common
short tokens (spaces, "the", "=") from being matched across unrelated
regions.  Whatever it leaves unmatched is handed to ``difflib`` so repeated
tokens inside a changed region can still line up.

Elements only need to be hashable and comparable by equality.
"""

from __future__ import annotations
import difflib
import logging
from collections.abc import Hashable, Sequence

import patiencediff

from .types import DiffOp, Token

logger = logging.getLogger(__name__)

Block = tuple[int, int, int]
Opcode = tuple[str, int, int, int, int]


def matching_blocks(a: Sequence[Hashable], b: Sequence[Hashable]) -> list[Block]:
    """Return monotonic ``(i, j, size)`` matches, ending with ``(len(a), len(b), 0)``."""
    anchors = patiencediff.PatienceSequenceMatcher(None, a, b).get_matching_blocks()

    blocks: list[Block] = []
    i = j = 0
    for ai, bj, size in anchors:
        if i < ai and j < bj:
            blocks.extend(_fill_gap(a, b, i, ai, j, bj))
        if size:
            blocks.append((ai, bj, size))
        i, j = ai + size, bj + size

    blocks.append((len(a), len(b), 0))
    return _collapse(blocks)


def _fill_gap(
    a: Sequence[Hashable], b: Sequence[Hashable], alo: int, ahi: int, blo: int, bhi: int
) -> list[Block]:
    """Match the region between two anchors with difflib's LCS-style search."""
    matcher = difflib.SequenceMatcher(None, a[alo:ahi], b[blo:bhi], autojunk=False)
    found = [(alo + m.a, blo + m.b, m.size) for m in matcher.get_matching_blocks() if m.size]
    if found:
        logger.debug("fallback matched %d block(s) in gap a[%d:%d] b[%d:%d]",
                     len(found), alo, ahi, blo, bhi)
    return found


def _collapse(blocks: list[Block]) -> list[Block]:
    """Merge blocks that touch on both sides."""
    out: list[Block] = []
    for ai, bj, size in blocks:
        if out and size:
            pi, pj, psize = out[-1]
            if pi + psize == ai and pj + psize == bj:
                out[-1] = (pi, pj, psize + size)
                continue
        out.append((ai, bj, size))
    return out


def opcodes(a: Sequence[Hashable], b: Sequence[Hashable]) -> list[Opcode]:
    """difflib-style ``(tag, i1, i2, j1, j2)`` tuples covering both sequences."""
    codes: list[Opcode] = []
    i = j = 0
    for ai, bj, size in matching_blocks(a, b):
        if i < ai and j < bj:
            codes.append(("replace", i, ai, j, bj))
        elif i < ai:
            codes.append(("delete", i, ai, j, bj))
        elif j < bj:
            codes.append(("insert", i, ai, j, bj))
        if size:
            codes.append(("equal", ai, ai + size, bj, bj + size))
        i, j = ai + size, bj + size
    return codes


def diff_tokens(old_tokens: Sequence[Token], new_tokens: Sequence[Token]) -> list[DiffOp]:
    """Diff two token sequences by content.

    A ``replace`` region becomes a delete run followed by an insert run;
    the edit builder relies on that order to fold the pair into one entry.
    """
    old_texts = [t.text for t in old_tokens]
    new_texts = [t.text for t in new_tokens]

    ops: list[DiffOp] = []
    for tag, i1, i2, j1, j2 in opcodes(old_texts, new_texts):
        if tag == "equal":
            ops.append(DiffOp("equal", "".join(old_texts[i1:i2])))
            continue
        if tag in ("delete", "replace"):
            ops.append(DiffOp("delete", "".join(old_texts[i1:i2])))
        if tag in ("insert", "replace"):
            ops.append(DiffOp("insert", "".join(new_texts[j1:j2])))
    return ops
