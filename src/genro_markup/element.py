# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element - the node type assembled by ElementBuilder.

An Element is a named node with optional text and an ordered list of
child elements. It renders itself as indented markup, one tag per line::

    <ul>
      <li>
        hello
      </li>
    </ul>

Names and texts are written verbatim: nothing is escaped and no
attributes are supported.
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

from .exceptions import InvalidElementError

if TYPE_CHECKING:
    from .builder import ElementBuilder


class Element:
    """A node in a markup tree.

    Each element has:
    - name: The tag name, written as <name> ... </name>
    - text: Body content, rendered on its own line when not blank
    - children: Child elements, rendered in insertion order

    Example:
        >>> li = Element('li', 'hello')
        >>> print(li, end='')
        <li>
          hello
        </li>
    """

    __slots__ = ('_name', '_text', 'children')

    # Spaces added per nesting level
    indent_width: int = 2

    def __init__(self, name: str = '', text: str = '') -> None:
        """Initialize an Element.

        Args:
            name: The tag name. Empty for a placeholder root.
            text: Optional body content.

        Raises:
            InvalidElementError: If name or text is not a string.
        """
        self.name = name
        self.text = text
        self.children: list[Element] = []

    @property
    def name(self) -> str:
        """The tag name. Must be a string."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _check_str('name', value)

    @property
    def text(self) -> str:
        """The body content. Must be a string."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = _check_str('text', value)

    @classmethod
    def create(cls, name: str, text: str = '') -> Element:
        """Create an element with no children."""
        return cls(name, text)

    @classmethod
    def create_builder(cls, name: str) -> ElementBuilder:
        """Return an ElementBuilder whose root is an empty `name` element.

        The builder creates its root and children with this class.

        Example:
            >>> builder = Element.create_builder('ul')
            >>> builder.add_child_fluent('li', 'hello').add_child_fluent('li', 'world')
        """
        from .builder import ElementBuilder
        return ElementBuilder(name, element_factory=cls)

    def __repr__(self) -> str:
        return f"Element({self.name!r}, children={len(self.children)})"

    def __str__(self) -> str:
        return self.render()

    def walk(self) -> Iterator[tuple[int, Element]]:
        """Yield (depth, element) pairs in depth-first pre-order.

        The element itself comes first, at depth 0.
        """
        def _walk_gen(element: Element, depth: int) -> Iterator[tuple[int, Element]]:
            yield depth, element
            for child in element.children:
                yield from _walk_gen(child, depth + 1)

        return _walk_gen(self, 0)

    def render(self) -> str:
        """Render the element and its descendants as indented markup.

        The indent_width of this element applies to the whole tree.
        Every line, closing tags included, ends with a newline.
        """
        lines: list[str] = []
        self._render(lines, 0, self.indent_width)
        return ''.join(lines)

    def _render(self, lines: list[str], depth: int, width: int) -> None:
        """Recursively append the rendering of this element at `depth`."""
        spaces = ' ' * (width * depth)
        lines.append(f"{spaces}<{self.name}>\n")
        if self.text.strip():
            inner = ' ' * (width * (depth + 1))
            lines.append(f"{inner}{self.text}\n")
        for child in self.children:
            child._render(lines, depth + 1, width)
        lines.append(f"{spaces}</{self.name}>\n")


def _check_str(field: str, value: str) -> str:
    """Return value, raising InvalidElementError if it is not a string."""
    if not isinstance(value, str):
        raise InvalidElementError(
            f"Element {field} must be a string, got {type(value).__name__}"
        )
    return value
