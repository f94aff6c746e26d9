# -*- coding: utf-8 -*-
"""
    htmltokendiff
    ~~~~~~~~~~~~~

    Diffs HTML fragments token by token.  Nice to show what changed between
    two revisions of rich text for an arbitrary user.  Examples:

    >>> from htmltokendiff import html_diff

    >>> print(html_diff('<p>Hello world</p>', '<p>Hello beautiful world</p>'))
    <p>Hello <ins>beautiful </ins>world</p>

    >>> print(html_diff('<p>Hello</p>', '<p>Hi</p>'))
    <p><del>Hello</del><ins>Hi</ins></p>

    >>> print(html_diff('<ul><li>A</li></ul>', '<ul><li>A</li><li>B</li></ul>'))
    <ul><li>A</li><li><ins>B</ins></li></ul>

    >>> print(html_diff('<p style="color:red">Hi</p>', '<p style="color:blue">Hi</p>'))
    <p style="color:blue">Hi</p>

    :copyright: (c) 2011 by Armin Ronacher, see AUTHORS for more details.
    :license: BSD, see LICENSE for more details.
"""
from .attributes import strip_attributes
from .config import DiffConfig
from .differ import html_diff, render_html_diff, diff_genshi_stream
from .exceptions import HTMLDiffError, InvalidStateError, MissingArgumentError
from .matcher import MatchBlock, TokenMatcher
from .operations import Action, Operation, calculate_operations
from .parser import parse_html
from .renderer import render_operations
from .tokenizer import tokenize

__all__ = [
    'html_diff',
    'strip_attributes',
    'render_html_diff',
    'diff_genshi_stream',
    'parse_html',
    'tokenize',
    'calculate_operations',
    'render_operations',
    'DiffConfig',
    'Action',
    'Operation',
    'MatchBlock',
    'TokenMatcher',
    'HTMLDiffError',
    'InvalidStateError',
    'MissingArgumentError',
]
