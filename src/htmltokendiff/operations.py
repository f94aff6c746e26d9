# -*- coding: utf-8 -*-
"""
Edit script derived from the matching blocks.
"""
import logging
from collections import namedtuple
from enum import Enum

from .config import DiffConfig
from .exceptions import MissingArgumentError
from .matcher import TokenMatcher
from .tokenizer import has_word_char, is_single_whitespace

log = logging.getLogger(__name__)


class Action(str, Enum):
    """The four edit actions, named like ``difflib`` opcodes."""

    EQUAL = 'equal'
    INSERT = 'insert'
    DELETE = 'delete'
    REPLACE = 'replace'


class Operation(namedtuple('Operation', 'action start_in_before end_in_before '
                                        'start_in_after end_in_after')):
    """
    One step of the edit script.  Ends are inclusive; ``end_in_before`` is
    ``None`` for an insert and ``end_in_after`` is ``None`` for a delete.
    """

    __slots__ = ()

    def before_range(self):
        if self.end_in_before is None:
            return self.start_in_before, self.start_in_before
        return self.start_in_before, self.end_in_before + 1

    def after_range(self):
        if self.end_in_after is None:
            return self.start_in_after, self.start_in_after
        return self.start_in_after, self.end_in_after + 1

    def as_opcode(self):
        """``(tag, i1, i2, j1, j2)`` as returned by ``SequenceMatcher.get_opcodes``."""
        i1, i2 = self.before_range()
        j1, j2 = self.after_range()
        return (Action(self.action).value, i1, i2, j1, j2)


# (empieza en la posición actual de before, ... de after) -> acción del hueco
_GAP_ACTIONS = {
    (False, False): Action.REPLACE,
    (True, False): Action.INSERT,
    (False, True): Action.DELETE,
    (True, True): None,
}


def operations_from_blocks(before_tokens, after_tokens, blocks, config=None):
    """
    Walk `blocks` (sentinel included) and emit the operations covering every
    token of both lists, then run :func:`merge_operations` unless the config
    disables it.
    """
    config = config or DiffConfig()
    position_in_before = position_in_after = 0
    operations = []
    for match in blocks:
        action = _GAP_ACTIONS[(position_in_before == match.start_in_before,
                               position_in_after == match.start_in_after)]
        if action is not None:
            operations.append(Operation(
                action,
                position_in_before,
                match.start_in_before - 1 if action is not Action.INSERT else None,
                position_in_after,
                match.start_in_after - 1 if action is not Action.DELETE else None,
            ))
        if match.length != 0:
            operations.append(Operation(
                Action.EQUAL,
                match.start_in_before, match.end_in_before,
                match.start_in_after, match.end_in_after,
            ))
        position_in_before = match.end_in_before + 1
        position_in_after = match.end_in_after + 1
    if config.merge_operations:
        operations = merge_operations(before_tokens, operations)
    log.debug('%d operations', len(operations))
    return operations


def _is_single_whitespace_equal(op, before_tokens):
    if op.action is not Action.EQUAL or op.end_in_before is None:
        return False
    if op.end_in_before != op.start_in_before:
        return False
    return is_single_whitespace(before_tokens[op.start_in_before])


def _starts_with_word_token(op, before_tokens):
    # Sólo mira el primer token de before, no el lado after ni el último token.
    if op is None or op.action is not Action.REPLACE:
        return False
    return has_word_char(before_tokens[op.start_in_before])


def merge_operations(before_tokens, operations):
    """
    Fold an operation into the preceding one when

    * the previous one is a replace starting with a word token and the
      current one is an equal over a single whitespace character, or
    * both are replaces.

    This keeps ``one two`` -> ``uno dos`` as one ``<del>``/``<ins>`` pair
    instead of alternating markers around every space.
    """
    merged = []
    last = None
    for op in operations:
        if ((_is_single_whitespace_equal(op, before_tokens)
                and _starts_with_word_token(last, before_tokens))
                or (op.action is Action.REPLACE and last is not None
                    and last.action is Action.REPLACE)):
            last = last._replace(end_in_before=op.end_in_before,
                                 end_in_after=op.end_in_after)
            merged[-1] = last
        else:
            merged.append(op)
            last = op
    return merged


def calculate_operations(before_tokens, after_tokens, config=None):
    """
    Build the edit script turning `before_tokens` into `after_tokens`.

    >>> [op.as_opcode() for op in calculate_operations(['a', 'b'], ['a', 'c', 'b'])]
    [('equal', 0, 1, 0, 1), ('insert', 1, 1, 1, 2), ('equal', 1, 2, 2, 3)]
    """
    if before_tokens is None:
        raise MissingArgumentError('calculate_operations() needs before_tokens')
    if after_tokens is None:
        raise MissingArgumentError('calculate_operations() needs after_tokens')
    return TokenMatcher(before_tokens, after_tokens, config).get_operations()
