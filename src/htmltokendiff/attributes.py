# -*- coding: utf-8 -*-
"""
Normalización de atributos para la comparación previa al diff.
"""
from .config import _tag_markup_re, _attribute_re


def _strip_tag(match):
    return _attribute_re.sub(u'', match.group(0))


def strip_attributes(html):
    """
    Remove every ``key="value"`` pair from the tags of `html`.

    Tag names and a trailing self-closing slash survive; text outside tags is
    never touched.

    >>> strip_attributes('<img src="f.jpg" alt="bar"/>')
    '<img/>'
    >>> strip_attributes('<td colspan="2" rowspan="3">x</td>')
    '<td>x</td>'
    """
    return _tag_markup_re.sub(_strip_tag, html)


def same_without_attributes(before, after):
    """True when the two fragments differ only in tag attributes."""
    return strip_attributes(before) == strip_attributes(after)
