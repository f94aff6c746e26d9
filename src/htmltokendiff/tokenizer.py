# -*- coding: utf-8 -*-
"""
Tokenizer that splits an HTML string into tags, whitespace runs and words.

Joining the tokens gives back the input unchanged, so every later stage can
slice token lists and emit them verbatim.
"""
import unicodedata

from .config import (
    WORD_PUNCTUATION, _whitespace_re, _single_whitespace_re, _tag_token_re
)
from .exceptions import InvalidStateError

CHAR = 'char'
TAG = 'tag'
WHITESPACE = 'whitespace'


def is_start_of_tag(char):
    return char == u'<'


def is_end_of_tag(char):
    return char == u'>'


def is_whitespace(text):
    """True if `text` is made only of whitespace."""
    return _whitespace_re.fullmatch(text) is not None


def is_single_whitespace(text):
    return _single_whitespace_re.fullmatch(text) is not None


def is_word_char(char):
    """Unicode letters and numbers, plus ``_ - \\ # @``."""
    if char in WORD_PUNCTUATION:
        return True
    return unicodedata.category(char)[0] in ('L', 'N')


def has_word_char(token):
    return any(is_word_char(c) for c in token)


def is_tag(token):
    return _tag_token_re.fullmatch(token) is not None


def is_not_tag(token):
    return not is_tag(token)


def tokenize(html):
    """
    Split `html` into a list of tokens.

    >>> tokenize('<p>Hello, world</p>')
    ['<p>', 'Hello', ',', ' ', 'world', '</p>']
    """
    mode = CHAR
    current = u''
    words = []
    for char in html:
        if mode == TAG:
            if is_end_of_tag(char):
                current += u'>'
                words.append(current)
                current = u''
                # '>' nunca es espacio: en la práctica siempre se vuelve a CHAR.
                if is_whitespace(char):
                    mode = WHITESPACE
                else:
                    mode = CHAR
            else:
                current += char
        elif mode == CHAR:
            if is_start_of_tag(char):
                if current:
                    words.append(current)
                current = u'<'
                mode = TAG
            elif is_single_whitespace(char):
                if current:
                    words.append(current)
                current = char
                mode = WHITESPACE
            elif is_word_char(char):
                current += char
            else:
                if current:
                    words.append(current)
                current = char
        elif mode == WHITESPACE:
            if is_start_of_tag(char):
                if current:
                    words.append(current)
                current = u'<'
                mode = TAG
            elif is_whitespace(char):
                current += char
            else:
                if current:
                    words.append(current)
                current = char
                mode = CHAR
        else:
            raise InvalidStateError('Unknown tokenizer mode %r' % (mode,))
    if current:
        words.append(current)
    return words
