# -*- coding: utf-8 -*-
"""
Funciones utilitarias para htmltokendiff.
"""


def consecutive_where(start, tokens, predicate):
    """
    Devuelve la racha de `tokens` que empieza en `start` y cumple `predicate`.

    >>> consecutive_where(1, ['<p>', 'a', ' ', '</p>'], lambda t: not t.startswith('<'))
    ['a', ' ']
    """
    run = []
    for token in tokens[start:]:
        if not predicate(token):
            break
        run.append(token)
    return run


def join_tokens(tokens):
    return u''.join(tokens)
