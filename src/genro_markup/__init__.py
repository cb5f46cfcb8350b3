# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Markup - Element trees assembled with the builder pattern.

A small zero-dependency library that builds trees of named, text-bearing
elements and renders them as indented markup.

Example:
    >>> from genro_markup import Element
    >>> builder = Element.create_builder('ul')
    >>> builder.add_child_fluent('li', 'hello').add_child_fluent('li', 'world')
    >>> print(builder.render(), end='')
    <ul>
      <li>
        hello
      </li>
      <li>
        world
      </li>
    </ul>
"""

__version__ = "0.1.0"

from .builder import ElementBuilder
from .element import Element
from .exceptions import InvalidElementError, MarkupError

__all__ = [
    # Core classes
    "Element",
    "ElementBuilder",
    # Exceptions
    "MarkupError",
    "InvalidElementError",
]
