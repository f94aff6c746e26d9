# -*- coding: utf-8 -*-
"""
Excepciones de htmltokendiff.

Todas señalan errores de programación: cualquier cadena de entrada, incluso
HTML mal formado, produce un resultado sin lanzar excepciones.
"""


class HTMLDiffError(Exception):
    """Base class for every error raised by htmltokendiff."""


class InvalidStateError(HTMLDiffError):
    """The tokenizer or the renderer reached a state that cannot happen."""


class MissingArgumentError(HTMLDiffError, TypeError):
    """A token sequence required by the matcher was not given."""
