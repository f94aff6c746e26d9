from __future__ import annotations

import pytest

from htmltokendiff import MatchBlock, MissingArgumentError, TokenMatcher, tokenize
from htmltokendiff.matcher import build_index, find_match, find_matching_blocks


def _blocks(before: str, after: str) -> list[tuple[int, int, int]]:
    return [tuple(b) for b in find_matching_blocks(tokenize(before), tokenize(after))]


def test_build_index_lists_every_position_in_after():
    index = build_index(["a", "b", "x"], ["b", "a", "b", "a"])
    assert index == {"a": [1, 3], "b": [0, 2], "x": []}


def test_build_index_requires_both_sequences():
    with pytest.raises(MissingArgumentError):
        build_index(None, [])
    with pytest.raises(MissingArgumentError):
        build_index([], None)
    # Also a TypeError, as for any bad call signature
    with pytest.raises(TypeError):
        build_index([], None)


def test_find_match_returns_longest_run():
    before = ["a", "b", "c", "d"]
    after = ["x", "b", "c", "d", "a"]
    index = build_index(before, after)
    assert find_match(before, index, 0, 4, 0, 5) == MatchBlock(1, 1, 3)


def test_find_match_prefers_first_of_equal_length_runs():
    before = ["a", "b", "a", "c"]
    after = ["a", "c", "a", "b"]
    index = build_index(before, after)
    # "a b" and "a c" both have length 2; "a b" is reached first in before.
    assert find_match(before, index, 0, 4, 0, 4) == MatchBlock(0, 2, 2)


def test_find_match_respects_ranges():
    before = ["a", "b", "c"]
    after = ["a", "b", "c"]
    index = build_index(before, after)
    assert find_match(before, index, 1, 3, 0, 2) == MatchBlock(1, 1, 1)
    assert find_match(before, index, 0, 1, 1, 3) is None


def test_find_match_none_without_common_tokens():
    before = ["a"]
    after = ["b"]
    assert find_match(before, build_index(before, after), 0, 1, 0, 1) is None


def test_match_block_end_offsets():
    block = MatchBlock(2, 5, 3)
    assert block.end_in_before == 4
    assert block.end_in_after == 7
    empty = MatchBlock(4, 6, 0)
    assert empty.end_in_before == 3
    assert empty.end_in_after == 5


def test_blocks_are_ordered_and_split_around_changes():
    assert _blocks("<p>Hello world</p>", "<p>Hello beautiful world</p>") == [
        (0, 0, 3),
        (3, 5, 2),
    ]


def test_blocks_for_replaced_word():
    assert _blocks("<p>Hello</p>", "<p>Hi</p>") == [(0, 0, 1), (2, 2, 1)]


def test_blocks_empty_when_nothing_shared():
    assert _blocks("foo", "bar") == []
    assert _blocks("", "<p>x</p>") == []


def test_blocks_do_not_overlap():
    before = tokenize("a b a b c a b " * 20)
    after = tokenize("b a c b a b " * 20)
    blocks = find_matching_blocks(before, after)
    for prev, cur in zip(blocks, blocks[1:]):
        assert prev.end_in_before < cur.start_in_before
        assert prev.end_in_after < cur.start_in_after
    for block in blocks:
        assert before[block.start_in_before:block.end_in_before + 1] == \
            after[block.start_in_after:block.end_in_after + 1]


def test_fragmented_input_does_not_hit_recursion_limit():
    before = ["x%d" % i if i % 2 else "same%d" % i for i in range(4000)]
    after = ["y%d" % i if i % 2 else "same%d" % i for i in range(4000)]
    blocks = find_matching_blocks(before, after)
    assert len(blocks) == 2000


def test_token_matcher_appends_sentinel():
    m = TokenMatcher(tokenize("<p>a</p>"), tokenize("<p>b</p>"))
    blocks = m.get_matching_blocks()
    assert blocks[-1] == MatchBlock(3, 3, 0)
    assert m.get_matching_blocks() is blocks


def test_token_matcher_opcodes_like_difflib():
    m = TokenMatcher(["a", "b", "c"], ["a", "c", "d"])
    assert m.get_opcodes() == [
        ("equal", 0, 1, 0, 1),
        ("delete", 1, 2, 1, 1),
        ("equal", 2, 3, 1, 2),
        ("insert", 3, 3, 2, 3),
    ]


def test_token_matcher_requires_both_sequences():
    with pytest.raises(MissingArgumentError):
        TokenMatcher(None, ["a"])
