# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""List builder demo - build the same markup by hand and with a builder.

Usage:
    python examples/list_builder/demo.py
    python examples/list_builder/demo.py --item one --item two --fluent
    python examples/list_builder/demo.py --root ol --verbose
"""

from __future__ import annotations

import argparse
import logging

from genro_markup import Element, ElementBuilder


def build_paragraph(text: str) -> Element:
    """Assemble a one-element tree without a builder."""
    paragraph = Element('p')
    paragraph.text = text
    return paragraph


def build_list(root: str, items: list[str], fluent: bool = False) -> ElementBuilder:
    """Assemble a list of `li` children under `root`."""
    if fluent:
        builder = Element.create_builder(root)
        for item in items:
            builder = builder.add_child_fluent('li', item)
        return builder

    builder = ElementBuilder(root)
    for item in items:
        builder.add_child('li', item)
    return builder


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--root', default='ul', help='root element name')
    parser.add_argument(
        '--item', action='append', dest='items',
        help='list item text (repeatable, default: hello, world)',
    )
    parser.add_argument('--fluent', action='store_true', help='chain add_child_fluent calls')
    parser.add_argument('--verbose', action='store_true', help='log builder activity')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s - %(levelname)s - %(message)s')

    print("=" * 60)
    print("BY HAND")
    print("=" * 60)
    print(build_paragraph('hello').render(), end='')

    builder = build_list(args.root, args.items or ['hello', 'world'], fluent=args.fluent)

    print("=" * 60)
    print("BUILDER")
    print("=" * 60)
    print(builder.to_element().render(), end='')

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
