"""Tests for the sequence differ, edit builder and the WordDiffer API."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from word_diff import (
    DiffOp, EditEntry, EditScript, WordDiffer, WordDifferConfig,
    apply_edits, build_edits, diff_tokens, diff_words, opcodes, tokenize,
)
from word_diff.sequence import matching_blocks


OLD_CODE = """
    let pivot_index = partition(arrl);
    let a = 1;
    let b = 2;
    let

}
"""

NEW_CODE = """
    let pivot = partitio(arrr);
    let a = 1;
    let b = 2;
    let left = quick_sort(&arr[..pivot_index]);
    let right = quick_sort(&arr[pivot_index + 1..]);

}
"""

PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", ""),
    ("foo bar baz", "foo qux baz"),
    ("foo bar baz", "foo baz"),
    ("a c", "a b c"),
    ("the cat sat on the mat", "the dog sat on a mat"),
    ("x == y", "x != y"),
    ("a a a a", "a b a"),
    ("héllo wörld", "héllo world, ünïcödé"),
    ("日本語 テキスト", "日本語 の テキスト"),
    ("one\ntwo\nthree\n", "one\n2\nthree\nfour\n"),
    (OLD_CODE, NEW_CODE),
]


# ── Sequence differ ──────────────────────────────────────────────────

def test_opcodes_identical():
    assert opcodes(["a", "b", "c"], ["a", "b", "c"]) == [("equal", 0, 3, 0, 3)]


def test_opcodes_empty_sequences():
    assert opcodes([], []) == []
    assert opcodes([], ["x"]) == [("insert", 0, 0, 0, 1)]
    assert opcodes(["x"], []) == [("delete", 0, 1, 0, 0)]


def test_fallback_matches_without_unique_anchors():
    # Nothing is unique on both sides, so only the fallback can align these.
    a = ["a", "b", "a", "b"]
    b = ["c", "a", "b", "a", "b", "d"]
    assert matching_blocks(a, b) == [(0, 1, 4), (4, 6, 0)]
    assert opcodes(a, b) == [
        ("insert", 0, 0, 0, 1),
        ("equal", 0, 4, 1, 5),
        ("insert", 4, 4, 5, 6),
    ]


def test_unique_anchor_beats_longer_repeated_run():
    # "U" is the only element unique on both sides; the repeated "a" run is
    # longer but must not be matched across it.
    a = ["x", "a", "a", "a", "U", "y"]
    b = ["U", "a", "a", "a", "z"]
    assert matching_blocks(a, b) == [(4, 0, 1), (6, 5, 0)]
    assert opcodes(a, b) == [
        ("delete", 0, 4, 0, 0),
        ("equal", 4, 5, 0, 1),
        ("replace", 5, 6, 1, 5),
    ]


def test_diff_tokens_substitution_order():
    ops = diff_tokens(tokenize("foo bar baz"), tokenize("foo qux baz"))
    assert ops == [
        DiffOp("equal", "foo "),
        DiffOp("delete", "bar"),
        DiffOp("insert", "qux"),
        DiffOp("equal", " baz"),
    ]


@pytest.mark.parametrize("old,new", PAIRS)
def test_diff_tokens_reconstructs_both_sides(old, new):
    ops = diff_tokens(tokenize(old), tokenize(new))
    assert "".join(op.text for op in ops if op.tag != "insert") == old
    assert "".join(op.text for op in ops if op.tag != "delete") == new


# ── Edit builder ─────────────────────────────────────────────────────

def test_delete_then_insert_is_one_substitution():
    script = build_edits([
        DiffOp("equal", "foo "),
        DiffOp("delete", "bar"),
        DiffOp("insert", "qux"),
        DiffOp("equal", " baz"),
    ])
    assert list(script) == [EditEntry(4, 7, "qux")]


def test_consecutive_deletes_merge():
    script = build_edits([DiffOp("delete", "a"), DiffOp("delete", " b")])
    assert list(script) == [EditEntry(0, 3, "")]
    assert script[0].is_deletion


def test_consecutive_inserts_concatenate():
    script = build_edits([DiffOp("equal", "ab"), DiffOp("insert", "x"), DiffOp("insert", "y")])
    assert list(script) == [EditEntry(2, 2, "xy")]
    assert script[0].is_insertion


def test_insert_then_delete_at_same_point_merges():
    script = build_edits([DiffOp("insert", "x"), DiffOp("delete", "ab")])
    assert list(script) == [EditEntry(0, 2, "x")]


def test_separated_edits_stay_separate():
    script = build_edits([DiffOp("delete", "a"), DiffOp("equal", " "), DiffOp("delete", "b")])
    assert list(script) == [EditEntry(0, 1, ""), EditEntry(2, 3, "")]


def test_start_offset_shifts_ranges():
    script = build_edits([DiffOp("equal", "foo "), DiffOp("delete", "bar")], 10)
    assert list(script) == [EditEntry(14, 17, "")]


def test_byte_and_char_units():
    ops = [DiffOp("equal", "é "), DiffOp("delete", "ü")]
    assert list(build_edits(ops)) == [EditEntry(3, 5, "")]
    assert list(build_edits(ops, unit="char")) == [EditEntry(2, 3, "")]


def test_builder_rejects_unknown_unit_and_tag():
    with pytest.raises(ValueError):
        build_edits([], unit="word")
    with pytest.raises(ValueError):
        build_edits([DiffOp("replace", "x")])


# ── diff_words ───────────────────────────────────────────────────────

def test_substitution_is_one_entry():
    script = diff_words("foo bar baz", "foo qux baz")
    assert list(script) == [EditEntry(4, 7, "qux")]


def test_pure_insertion_between_words():
    assert list(diff_words("a c", "a b c")) == [EditEntry(2, 2, "b ")]


def test_pure_deletion():
    assert list(diff_words("foo bar baz", "foo baz")) == [EditEntry(4, 8, "")]


def test_change_inside_a_word_replaces_the_word():
    assert list(diff_words("ac", "abc")) == [EditEntry(0, 2, "abc")]


def test_empty_sides():
    assert list(diff_words("", "abc")) == [EditEntry(0, 0, "abc")]
    assert list(diff_words("abc", "")) == [EditEntry(0, 3, "")]
    assert len(diff_words("", "")) == 0


@pytest.mark.parametrize("text", ["", "a", "a a a", "foo bar", OLD_CODE])
@pytest.mark.parametrize("offset", [0, 7, 2**40])
def test_identical_texts_yield_no_edits(text, offset):
    assert len(diff_words(text, text, offset)) == 0


@pytest.mark.parametrize("old,new", PAIRS)
def test_offset_translation(old, new):
    base = diff_words(old, new)
    shifted = diff_words(old, new, 42)
    assert [(e.start + 42, e.end + 42, e.replacement) for e in base] == \
        [(e.start, e.end, e.replacement) for e in shifted]


@pytest.mark.parametrize("old,new", PAIRS)
def test_entries_increasing_and_non_adjacent(old, new):
    script = diff_words(old, new)
    for entry in script:
        assert entry.start <= entry.end
    for prev, cur in zip(script, list(script)[1:]):
        assert prev.end < cur.start


@pytest.mark.parametrize("old,new", PAIRS)
@pytest.mark.parametrize("offset", [0, 5])
def test_round_trip(old, new, offset):
    script = diff_words(old, new, offset)
    assert apply_edits(old, script, offset) == new


@pytest.mark.parametrize("old,new", PAIRS)
def test_round_trip_char_unit(old, new):
    differ = WordDiffer(WordDifferConfig(unit="char"))
    script = differ.diff(old, new, 3)
    assert script.unit == "char"
    assert apply_edits(old, script, 3) == new


def test_multibyte_positions():
    assert list(diff_words("héllo wörld", "héllo world")) == [EditEntry(7, 13, "world")]
    differ = WordDiffer(WordDifferConfig(unit="char"))
    assert list(differ.diff("héllo wörld", "héllo world")) == [EditEntry(6, 11, "world")]


def test_ignore_punctuation_coarsens_edits():
    assert list(diff_words("f(x)", "f(y)")) == [EditEntry(2, 3, "y")]
    differ = WordDiffer(WordDifferConfig(ignore_punctuation=True))
    assert list(differ.diff("f(x)", "f(y)")) == [EditEntry(0, 4, "f(y)")]


def test_negative_offset_rejected():
    with pytest.raises(ValueError):
        diff_words("a", "b", -1)


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        WordDiffer(WordDifferConfig(unit="line"))


def test_differ_is_reusable():
    differ = WordDiffer()
    first = differ.diff("foo bar", "foo baz")
    differ.diff("something else", "entirely")
    assert differ.diff("foo bar", "foo baz") == first


# ── EditScript ───────────────────────────────────────────────────────

def test_accessors_and_out_of_bounds():
    script = diff_words("foo bar baz", "foo qux baz")
    assert len(script) == 1
    assert (script.start(0), script.end(0), script.data(0)) == (4, 7, "qux")
    assert script.start(1) is None
    assert script.end(-1) is None
    assert script.data(99) is None
    assert script.get(1) is None


def test_list_conversion():
    script = diff_words("the cat sat", "a dog sat down")
    restored = EditScript.from_list(script.to_list())
    assert restored == script


def test_apply_rejects_out_of_range_entries():
    script = EditScript([EditEntry(2, 9, "")])
    with pytest.raises(ValueError):
        apply_edits("abc", script)
    with pytest.raises(ValueError):
        apply_edits("abc", EditScript([EditEntry(0, 1, "")]), offset=5)
