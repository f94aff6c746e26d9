# -*- coding: utf-8 -*-
"""
Configuración y constantes para htmltokendiff.
"""
import re

# Expresiones regulares (exportadas para uso en otros módulos).
# Se usan con fullmatch/search: `$` aceptaría un salto de línea final.
_whitespace_re = re.compile(r'\s+', re.U)
_single_whitespace_re = re.compile(r'\s', re.U)
_tag_token_re = re.compile(r'\s*<[^>]+>\s*', re.U)
_tag_markup_re = re.compile(r'<[^>]+>', re.U)
_attribute_re = re.compile(r' [^=]+="[^"]+"', re.U)

# Caracteres que, además de letras y números Unicode, forman parte de una palabra
WORD_PUNCTUATION = frozenset(u'_-\\#@')


class DiffConfig(object):
    """
    Runtime configuration for diff rendering.

    Class attributes are the defaults; keyword arguments override them on a
    single instance::

        >>> DiffConfig(insert_tag='span').insert_tag
        'span'
    """

    # Marker elements
    insert_tag = 'ins'
    delete_tag = 'del'

    # Attribute-only edits (inline styles, colspan...) return the new markup
    # untouched instead of being diffed.
    ignore_attribute_changes = True

    # Fold a replace + single space + replace into one del/ins pair
    merge_operations = True

    # Display rendition (render_html_diff / diff_genshi_stream)
    wrapper_element = 'div'
    wrapper_class = 'diff'

    def __init__(self, **options):
        for key, value in options.items():
            if not hasattr(type(self), key):
                raise TypeError('unknown DiffConfig option %r' % key)
            setattr(self, key, value)

    def __repr__(self):
        return '<DiffConfig ins=%r del=%r>' % (self.insert_tag, self.delete_tag)
