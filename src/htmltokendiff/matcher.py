# -*- coding: utf-8 -*-
"""
Longest-matching-block search over two token lists.

The shape follows :class:`difflib.SequenceMatcher`: an index of where every
token of the old list appears in the new list, a longest-match scan limited
to a pair of ranges, and a divide-and-conquer pass that splits the ranges
around each match.  Unlike ``SequenceMatcher`` there is no junk heuristic:
every token takes part in matching, which keeps the result stable for the
long whitespace and punctuation runs common in HTML.
"""
import logging
from collections import defaultdict, namedtuple

from .exceptions import MissingArgumentError

log = logging.getLogger(__name__)


class MatchBlock(namedtuple('MatchBlock', 'start_in_before start_in_after length')):
    """A run of `length` equal tokens starting at the given offsets."""

    __slots__ = ()

    @property
    def end_in_before(self):
        return self.start_in_before + self.length - 1

    @property
    def end_in_after(self):
        return self.start_in_after + self.length - 1


def build_index(before_tokens, after_tokens):
    """
    Map every token of `before_tokens` to the sorted positions where it
    occurs in `after_tokens` (an empty list when it never does).
    """
    if before_tokens is None:
        raise MissingArgumentError('build_index() needs before_tokens')
    if after_tokens is None:
        raise MissingArgumentError('build_index() needs after_tokens')
    positions = defaultdict(list)
    for idx, token in enumerate(after_tokens):
        positions[token].append(idx)
    return dict((token, positions.get(token, [])) for token in before_tokens)


def find_match(before_tokens, index, start_in_before, end_in_before,
               start_in_after, end_in_after):
    """
    Find the longest run of equal tokens inside
    ``before_tokens[start_in_before:end_in_before]`` and the matching
    ``[start_in_after:end_in_after)`` range of the new list.

    Only a strictly longer run replaces the best one, so among runs of the
    same length the one seen first (lowest before offset) wins.  Returns
    ``None`` when the ranges share no token.
    """
    best_in_before = start_in_before
    best_in_after = start_in_after
    best_length = 0
    # match_length_at[j] = longest run ending at before[i - 1], after[j]
    match_length_at = {}
    for index_in_before in range(start_in_before, end_in_before):
        new_match_length_at = {}
        for index_in_after in index[before_tokens[index_in_before]]:
            if index_in_after < start_in_after:
                continue
            if index_in_after >= end_in_after:
                break
            new_length = match_length_at.get(index_in_after - 1, 0) + 1
            new_match_length_at[index_in_after] = new_length
            if new_length > best_length:
                best_in_before = index_in_before - new_length + 1
                best_in_after = index_in_after - new_length + 1
                best_length = new_length
        match_length_at = new_match_length_at
    if best_length == 0:
        return None
    return MatchBlock(best_in_before, best_in_after, best_length)


def find_matching_blocks(before_tokens, after_tokens, index=None):
    """
    Return the ordered, non-overlapping list of matching blocks between the
    two token lists (without the end-of-stream sentinel).

    The ranges left and right of every match are searched again until no
    match is left.  Pending ranges live on an explicit stack, so deeply
    fragmented documents do not hit the recursion limit.
    """
    if index is None:
        index = build_index(before_tokens, after_tokens)
    blocks = []
    queue = [(0, len(before_tokens), 0, len(after_tokens))]
    while queue:
        blo, bhi, alo, ahi = queue.pop()
        match = find_match(before_tokens, index, blo, bhi, alo, ahi)
        if match is None:
            continue
        blocks.append(match)
        if blo < match.start_in_before and alo < match.start_in_after:
            queue.append((blo, match.start_in_before, alo, match.start_in_after))
        if match.end_in_before + 1 < bhi and match.end_in_after + 1 < ahi:
            queue.append((match.end_in_before + 1, bhi, match.end_in_after + 1, ahi))
    blocks.sort()
    return blocks


class TokenMatcher(object):
    """
    ``SequenceMatcher``-like front end for two token lists.

    >>> m = TokenMatcher(['a', ' ', 'b'], ['a', ' ', 'c'])
    >>> m.find_longest_match()
    MatchBlock(start_in_before=0, start_in_after=0, length=2)
    >>> m.get_opcodes()
    [('equal', 0, 2, 0, 2), ('replace', 2, 3, 2, 3)]
    """

    def __init__(self, before_tokens, after_tokens, config=None):
        if before_tokens is None:
            raise MissingArgumentError('TokenMatcher needs before_tokens')
        if after_tokens is None:
            raise MissingArgumentError('TokenMatcher needs after_tokens')
        self.a = list(before_tokens)
        self.b = list(after_tokens)
        self.config = config
        self.index = build_index(self.a, self.b)
        self.matching_blocks = None
        self.operations = None

    def find_longest_match(self, blo=0, bhi=None, alo=0, ahi=None):
        if bhi is None:
            bhi = len(self.a)
        if ahi is None:
            ahi = len(self.b)
        return find_match(self.a, self.index, blo, bhi, alo, ahi)

    def get_matching_blocks(self):
        """Matching blocks followed by the ``(len(a), len(b), 0)`` sentinel."""
        if self.matching_blocks is not None:
            return self.matching_blocks
        blocks = find_matching_blocks(self.a, self.b, self.index)
        log.debug('%d matching blocks between %d and %d tokens',
                  len(blocks), len(self.a), len(self.b))
        blocks.append(MatchBlock(len(self.a), len(self.b), 0))
        self.matching_blocks = blocks
        return blocks

    def get_operations(self):
        if self.operations is None:
            from .operations import operations_from_blocks
            self.operations = operations_from_blocks(
                self.a, self.b, self.get_matching_blocks(), self.config)
        return self.operations

    def get_opcodes(self):
        return [op.as_opcode() for op in self.get_operations()]
