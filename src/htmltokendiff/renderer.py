# -*- coding: utf-8 -*-
"""
Rendering of an edit script back into annotated HTML.

Changed text goes inside ``<ins>``/``<del>`` markers; tags inside a changed
range are emitted as they are, outside the markers, so a new ``<li>`` comes
out as ``<li><ins>text</ins></li>`` and never ``<ins><li>text</li></ins>``.
"""
from .config import DiffConfig
from .exceptions import InvalidStateError
from .operations import Action
from .tokenizer import is_tag, is_not_tag
from .utils import consecutive_where, join_tokens


def wrap(tag, tokens):
    """
    Wrap the runs of non-tag tokens in `tag`, passing tag tokens through.

    >>> wrap('ins', ['<li>', 'C', '</li>'])
    '<li><ins>C</ins></li>'
    """
    rendering = []
    position = 0
    length = len(tokens)
    while position < length:
        non_tags = consecutive_where(position, tokens, is_not_tag)
        position += len(non_tags)
        if non_tags:
            rendering.append(u'<%s>%s</%s>' % (tag, join_tokens(non_tags), tag))
        if position >= length:
            break
        tags = consecutive_where(position, tokens, is_tag)
        position += len(tags)
        rendering.append(join_tokens(tags))
    return u''.join(rendering)


def _slice(tokens, bounds):
    start, end = bounds
    return tokens[start:end]


def render_equal(op, before_tokens, after_tokens, config):
    return join_tokens(_slice(before_tokens, op.before_range()))


def render_insert(op, before_tokens, after_tokens, config):
    return wrap(config.insert_tag, _slice(after_tokens, op.after_range()))


def render_delete(op, before_tokens, after_tokens, config):
    return wrap(config.delete_tag, _slice(before_tokens, op.before_range()))


def render_replace(op, before_tokens, after_tokens, config):
    return (render_delete(op, before_tokens, after_tokens, config) +
            render_insert(op, before_tokens, after_tokens, config))


_RENDERERS = {
    Action.EQUAL: render_equal,
    Action.INSERT: render_insert,
    Action.DELETE: render_delete,
    Action.REPLACE: render_replace,
}


def render_operations(before_tokens, after_tokens, operations, config=None):
    """Replay `operations` over the two token lists and return the HTML."""
    config = config or DiffConfig()
    rendering = []
    for op in operations:
        try:
            renderer = _RENDERERS[Action(op.action)]
        except ValueError:
            raise InvalidStateError('Unknown action %r' % (op.action,))
        rendering.append(renderer(op, before_tokens, after_tokens, config))
    return u''.join(rendering)
