# -*- coding: utf-8 -*-
"""
Entry points that diff two HTML fragments.
"""
import logging

from .attributes import same_without_attributes
from .config import DiffConfig
from .operations import calculate_operations
from .renderer import render_operations
from .tokenizer import tokenize

log = logging.getLogger(__name__)


def html_diff(before, after, config=None):
    """
    Return `after` with the text removed since `before` inside ``<del>`` and
    the text added inside ``<ins>``.

    Identical inputs come back unchanged.  When the inputs differ only in
    tag attributes the newer markup is returned without markers.
    """
    config = config or DiffConfig()
    if before == after:
        log.debug('inputs are identical')
        return before
    if config.ignore_attribute_changes and \
            same_without_attributes(before, after):
        log.debug('inputs differ only in attributes')
        return after
    before_tokens = tokenize(before)
    after_tokens = tokenize(after)
    log.debug('diffing %d against %d tokens', len(before_tokens), len(after_tokens))
    operations = calculate_operations(before_tokens, after_tokens, config)
    return render_operations(before_tokens, after_tokens, operations, config)


def render_html_diff(old, new, wrapper_element=None, wrapper_class=None, config=None):
    """
    Renders the diff between two HTML fragments as a well-formed fragment
    wrapped in ``<div class="diff">``.

    The raw diff is re-parsed with html5lib, so markers around swapped or
    unclosed tags are repaired into valid nesting.
    """
    from .parser import stream_to_html
    return stream_to_html(_diff_stream(old, new, wrapper_element, wrapper_class, config))


def diff_genshi_stream(old_stream, new_stream, config=None):
    """Diff two Genshi streams; the result is a Genshi stream as well."""
    from .parser import stream_to_html
    return _diff_stream(stream_to_html(old_stream), stream_to_html(new_stream),
                        None, None, config)


def _diff_stream(old, new, wrapper_element, wrapper_class, config):
    from .parser import parse_html
    config = config or DiffConfig()
    if wrapper_element is None:
        wrapper_element = config.wrapper_element
    if wrapper_class is None:
        wrapper_class = config.wrapper_class
    return parse_html(html_diff(old, new, config), wrapper_element, wrapper_class)
