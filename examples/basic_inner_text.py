#!/usr/bin/env python3
"""
Rendered text of a small styled document.

This example demonstrates:
- Building a document with precomputed styles
- Getting innerText-style text for any element
- Inspecting the raw items behind the text
- Caching rendered text and invalidating it after a change
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from renderedtextlib import InnerTextCache, collect_items, inner_text
from renderedtextlib.adapters import MemoryNodeProvider, document, element


def cell(value):
    return element('td', value, display='table-cell')


def row(*cells):
    return element('tr', *cells, display='table-row')


def build_page():
    """Build a page with paragraphs, a table, a form and hidden content."""
    body = element(
        'body',
        element('h1', 'Quarterly   report', display='block', text_transform='uppercase'),
        element('p', 'Numbers are ', element('b', 'final'), '.'),
        element('table',
                row(cell('Q1'), cell('120')),
                row(cell('Q2'), cell('135')),
                display='table'),
        element('p', 'Region: ', element('select', element('option', 'North'), element('option', 'South'))),
        element('div', 'draft notes', display='none'),
        element('pre', 'a  b\n  c', display='block', white_space='pre'),
        display='block',
    )
    document(body)
    return body


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    provider = MemoryNodeProvider()
    body = build_page()

    print("=" * 60)
    print("innerText")
    print("=" * 60)
    print(inner_text(body, provider))

    print()
    print("=" * 60)
    print("Raw items for the first paragraph")
    print("=" * 60)
    for item in collect_items(body.children[1], provider):
        print(f"  {item!r}")

    print()
    print("=" * 60)
    print("Cached lookups")
    print("=" * 60)
    cache = InnerTextCache(provider, max_entries=16)
    paragraph = body.children[1]
    print(f"  before: {cache.get(paragraph).value!r}")
    paragraph.append(' Really.')
    cache.mark_stale(paragraph)
    print(f"  after:  {cache.get(paragraph).value!r}")
    print(f"  stats:  {cache.get_stats()}")


if __name__ == "__main__":
    main()
