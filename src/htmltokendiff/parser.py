# -*- coding: utf-8 -*-
"""
Puente entre el diff en texto y los streams de Genshi.

html5lib repara el anidamiento (etiquetas cruzadas, sin cerrar) y Genshi
serializa el árbol resultante.
"""
from genshi.core import Stream
from genshi.input import ET
import html5lib


def parse_html(html, wrapper_element='div', wrapper_class='diff'):
    """
    Parse an HTML fragment into a Genshi stream rooted at `wrapper_element`.

    `wrapper_class` of ``None`` leaves the wrapper without a class.
    """
    fragment = html5lib.parseFragment(html, treebuilder='etree',
                                      namespaceHTMLElements=False)
    fragment.tag = wrapper_element
    fragment.attrib.clear()
    if wrapper_class is not None:
        fragment.set('class', wrapper_class)
    return Stream(list(ET(fragment)))


def stream_to_html(stream):
    """Serializa un stream de Genshi como HTML (texto, no bytes)."""
    return stream.render('html', encoding=None)
