# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementBuilder - Builder pattern for Element trees."""

from __future__ import annotations

import logging

from .element import Element

logger = logging.getLogger(__name__)


class ElementBuilder:
    """Incrementally assemble an Element tree under a single root.

    Children can be added in two ways:

    1. One statement per child, keeping a reference to the builder:

        >>> builder = ElementBuilder('ul')
        >>> builder.add_child('li', 'hello')
        >>> builder.add_child('li', 'world')

    2. Chained, since add_child_fluent() returns the builder itself:

        >>> builder = ElementBuilder.init('ul')
        >>> builder.add_child_fluent('li', 'hello').add_child_fluent('li', 'world')

    The finished tree is obtained explicitly with build() or to_element().
    """

    __slots__ = ('root_name', 'root', '_element_factory')

    element_factory: type[Element] = Element

    def __init__(
        self,
        root_name: str,
        element_factory: type[Element] | None = None,
    ) -> None:
        """Initialize an ElementBuilder.

        Args:
            root_name: Name of the root element. Kept for clear().
            element_factory: Element class for the root and its children.
                If None, uses the class-level element_factory.
        """
        self.root_name = root_name
        self._element_factory = element_factory or self.element_factory
        self.root = self._element_factory(root_name, '')
        logger.debug("Created builder for root %r", root_name)

    @classmethod
    def init(cls, root_name: str) -> ElementBuilder:
        """Create a builder for a `root_name` element."""
        return cls(root_name)

    def __repr__(self) -> str:
        return f"ElementBuilder({self.root_name!r}, children={len(self.root.children)})"

    def __str__(self) -> str:
        return self.render()

    def add_child(self, child_name: str, child_text: str = '') -> None:
        """Append a leaf element to the root."""
        self.root.children.append(self._element_factory(child_name, child_text))

    def add_child_fluent(self, child_name: str, child_text: str = '') -> ElementBuilder:
        """Append a leaf element to the root and return this builder.

        Example:
            >>> builder.add_child_fluent('li', 'a').add_child_fluent('li', 'b')
        """
        self.add_child(child_name, child_text)
        return self

    def clear(self) -> None:
        """Start over with an empty root.

        The root is replaced, not emptied: elements returned earlier by
        build() keep their children.
        """
        logger.debug(
            "Clearing builder %r, dropping %d children",
            self.root_name, len(self.root.children),
        )
        self.root = self._element_factory(self.root_name, '')

    def build(self) -> Element:
        """Return the root element being built (not a copy)."""
        return self.root

    def to_element(self) -> Element:
        """Convert the builder to its Element. Same as build()."""
        return self.build()

    def render(self) -> str:
        """Render the root element. Same as build().render()."""
        return self.build().render()
