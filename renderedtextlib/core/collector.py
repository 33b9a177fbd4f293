"""Rendered text collection for RenderedTextLib.

Collectors implement the rendered text collection steps of the HTML
standard (https://html.spec.whatwg.org/multipage/#rendered-text-collection-steps):
walk a subtree in document order and produce the text fragments and
required line break counts that approximate what the subtree displays.

The per-node rules live in the RenderedTextCollector base class. The two
concrete collectors only differ in how they walk the tree:

- RecursiveRenderedTextCollector descends with plain recursion, mirroring
  the standard's wording one call per node.
- IterativeRenderedTextCollector keeps an explicit stack, so arbitrarily
  deep trees never hit the interpreter's recursion limit.

Both produce identical items for the same tree.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .items import Item, LineBreakCount, TextFragment
from .node import ElementTag, NodeKind
from .provider import NodeProvider
from .state import TraversalState
from .style import Display, TextTransform
from .transform import capitalize_indexed, transform_indexed
from .whitespace import collapse_indexed, is_ascii_whitespace

logger = logging.getLogger(__name__)


@dataclass
class _OpenElement:
    """Bookkeeping for an element whose children are being collected."""
    node: Any
    display: Display
    surrounding_line_breaks: int


class RenderedTextCollector(ABC):
    """Abstract base class for rendered text collectors.

    Holds the provider and the element filter, and implements the rules
    for text nodes, br elements and the opening and closing of every other
    element. Subclasses decide how the tree is walked.
    """

    def __init__(self,
                 provider: NodeProvider,
                 exclude_filter: Optional[Callable[[Any], bool]] = None):
        """Initialize collector with a provider.

        Args:
            provider: NodeProvider for the tree being collected
            exclude_filter: Predicate over element nodes; elements for which
                it returns True contribute nothing, subtree included
        """
        self.provider = provider
        self.exclude_filter = exclude_filter

    def collect(self, node: Any, state: Optional[TraversalState] = None) -> List[Item]:
        """Collect the rendered text items of a subtree.

        Args:
            node: Root of the subtree
            state: Traversal state to continue from; a fresh one by default

        Returns:
            Items in document order
        """
        if state is None:
            state = TraversalState()
        items: List[Item] = []
        self._collect_into(node, state, items)
        return items

    @abstractmethod
    def _collect_into(self, node: Any, state: TraversalState, items: List[Item]) -> None:
        """Walk the subtree rooted at ``node``, appending to ``items``."""
        pass

    def _visit(self,
               node: Any,
               state: TraversalState,
               items: List[Item]) -> Tuple[Optional[_OpenElement], Iterable[Any]]:
        """Process a node on the way down.

        Returns:
            Tuple of (open element to close after the children, or None;
            the children to collect, in tree order)
        """
        provider = self.provider
        if not provider.is_connected(node):
            logger.debug("Skipping disconnected node %r", node)
            return None, ()

        kind = provider.node_kind(node)
        if kind is NodeKind.TEXT:
            self._collect_text(node, state, items)
            return None, ()
        if kind is not NodeKind.ELEMENT:
            return None, ()

        tag = provider.element_tag(node)
        if tag is ElementTag.NOSCRIPT:
            return None, ()

        if self.exclude_filter is not None and self.exclude_filter(node):
            logger.debug("Element %r excluded by filter", node)
            return None, ()

        if tag is ElementTag.BR:
            state.break_line()
            items.append(TextFragment('\n', node))
            return None, ()

        return self._open_element(node, tag, state, items)

    def _collect_text(self, node: Any, state: TraversalState, items: List[Item]) -> None:
        """Apply the text node rules."""
        provider = self.provider
        parent = provider.get_parent(node)
        content = provider.text_content(node)

        if parent is None:
            # No parent means no style to apply; use the text as is.
            items.append(TextFragment(content, node, 0, len(content)))
            return

        parent_tag = provider.tag_of(parent)
        if parent_tag is not None:
            if parent_tag.is_replaced:
                return
            # A select only renders options and optgroups, and an optgroup
            # only renders outside of its options when inside a select.
            if parent_tag is ElementTag.OPTGROUP:
                grandparent = provider.get_parent(parent)
                if grandparent is None or provider.tag_of(grandparent) is not ElementTag.SELECT:
                    return
            if parent_tag is ElementTag.SELECT:
                return

        # Inside a table only cells and captions contribute text
        if state.within_table and not state.within_table_content:
            return

        style = provider.get_style(parent)
        if style is None:
            return

        # Visibility is checked per text node, not per element: a visible
        # child may override a hidden parent.
        if not style.is_visible:
            return

        if style.display is Display.NONE:
            if parent_tag is None or not parent_tag.is_option_like:
                return

        preserve = style.preserves_whitespace
        trim_leading = not preserve and (
            state.may_start_with_whitespace or style.display.is_inline_block_like
        )
        chars = list(transform_indexed(
            collapse_indexed(enumerate(content), style.white_space_collapse, trim_leading),
            style.text_transform,
        ))
        if style.text_transform is TextTransform.CAPITALIZE:
            chars = capitalize_indexed(chars)

        # A trailing space dropped from the previous text comes back once we
        # know more text follows on the same line.
        if state.did_truncate_trailing_whitespace and not (chars and is_ascii_whitespace(chars[0][1])):
            items.append(TextFragment(' ', node))

        if not chars:
            return

        ends_with_whitespace = is_ascii_whitespace(chars[-1][1])
        if ends_with_whitespace and not preserve:
            chars.pop()
            state.may_start_with_whitespace = False
            state.did_truncate_trailing_whitespace = True
        else:
            state.may_start_with_whitespace = ends_with_whitespace
            state.did_truncate_trailing_whitespace = False

        if chars:
            offsets = tuple(offset for offset, _ in chars)
            text = ''.join(char for _, char in chars)
            items.append(TextFragment(text, node, offsets[0], offsets[-1] + 1, offsets))

    def _open_element(self,
                      node: Any,
                      tag: ElementTag,
                      state: TraversalState,
                      items: List[Item]) -> Tuple[Optional[_OpenElement], Iterable[Any]]:
        """Apply the rules that run before an element's children."""
        provider = self.provider
        style = provider.get_style(node)
        if style is None:
            logger.debug("Element %r has no style data, skipping subtree", node)
            return None, ()

        if not style.is_visible:
            # Children may still be visible, so collect them with no
            # display or table processing for this element.
            return None, provider.get_children(node)

        display = style.display
        surrounding = 1 if style.is_out_of_flow else 0

        if display is Display.TABLE:
            surrounding = 1
            state.within_table = True
        elif display is Display.TABLE_CELL:
            if not state.first_table_cell:
                items.append(TextFragment('\t', node))
                state.did_truncate_trailing_whitespace = False
            state.first_table_cell = False
            state.within_table_content = True
        elif display is Display.TABLE_ROW:
            if not state.first_table_row:
                items.append(TextFragment('\n', node))
                state.did_truncate_trailing_whitespace = False
            state.first_table_row = False
            state.first_table_cell = True
        elif display is Display.BLOCK:
            surrounding = 1
        elif display is Display.TABLE_CAPTION:
            surrounding = 1
            state.within_table_content = True
        elif display.is_inline_block_like:
            # No line break, but white space on both sides is kept.
            if state.did_truncate_trailing_whitespace:
                items.append(TextFragment(' ', node))
                state.did_truncate_trailing_whitespace = False
                state.may_start_with_whitespace = True

        if tag is ElementTag.PARAGRAPH:
            surrounding = 2
        elif tag.is_option_like:
            surrounding = 1

        if surrounding > 0:
            items.append(LineBreakCount(surrounding, node, 0))
            state.break_line()

        children: Iterable[Any] = provider.get_children(node)
        if tag.is_replaced:
            # <span>asd <input> qwe</span> renders "asd  qwe", two spaces.
            if display is not Display.BLOCK and state.did_truncate_trailing_whitespace:
                items.append(TextFragment(' ', node))
                state.did_truncate_trailing_whitespace = False
            state.may_start_with_whitespace = False
            children = ()
        elif tag is ElementTag.DETAILS and provider.get_attribute(node, 'open') is None:
            children = self._closed_details_children(node)

        return _OpenElement(node, display, surrounding), children

    def _closed_details_children(self, node: Any) -> List[Any]:
        """A closed details element only shows a leading summary."""
        provider = self.provider
        for child in provider.get_children(node):
            if provider.node_kind(child) is NodeKind.ELEMENT:
                if provider.element_tag(child) is ElementTag.SUMMARY:
                    return [child]
                break
        return []

    def _close_element(self, opened: _OpenElement, state: TraversalState, items: List[Item]) -> None:
        """Apply the rules that run after an element's children."""
        display = opened.display
        if display.is_inline_block_like:
            state.did_truncate_trailing_whitespace = False
            state.may_start_with_whitespace = False
        elif display is Display.TABLE:
            state.within_table = False
        elif display in (Display.TABLE_CELL, Display.TABLE_CAPTION):
            state.within_table_content = False

        if opened.surrounding_line_breaks > 0:
            items.append(LineBreakCount(opened.surrounding_line_breaks, opened.node,
                                        self.provider.child_count(opened.node)))
            state.break_line()


class RecursiveRenderedTextCollector(RenderedTextCollector):
    """Collector that descends with recursion, one call per node.

    Limited by the interpreter's recursion limit; prefer
    IterativeRenderedTextCollector for trees of unknown depth.
    """

    def _collect_into(self, node: Any, state: TraversalState, items: List[Item]) -> None:
        opened, children = self._visit(node, state, items)
        for child in children:
            self._collect_into(child, state, items)
        if opened is not None:
            self._close_element(opened, state, items)


_VISIT = 0
_CLOSE = 1


class IterativeRenderedTextCollector(RenderedTextCollector):
    """Collector that walks the tree with an explicit stack.

    The stack holds two kinds of entries: nodes still to visit, and open
    elements waiting for their children to finish. Children are pushed in
    reverse so they pop in tree order, above their parent's close entry.
    """

    def _collect_into(self, node: Any, state: TraversalState, items: List[Item]) -> None:
        stack: List[Tuple[int, Any]] = [(_VISIT, node)]

        while stack:
            action, payload = stack.pop()

            if action == _CLOSE:
                self._close_element(payload, state, items)
                continue

            opened, children = self._visit(payload, state, items)
            if opened is not None:
                stack.append((_CLOSE, opened))
            stack.extend((_VISIT, child) for child in reversed(list(children)))


# Factory function for creating collectors by name
def create_collector(strategy: str,
                     provider: NodeProvider,
                     exclude_filter: Optional[Callable[[Any], bool]] = None) -> RenderedTextCollector:
    """Create a collector instance by strategy name.

    Args:
        strategy: Name of the walking strategy (recursive, iterative, stack)
        provider: NodeProvider for the tree
        exclude_filter: Optional element filter passed to the collector

    Returns:
        RenderedTextCollector instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'recursive': RecursiveRenderedTextCollector,
        'iterative': IterativeRenderedTextCollector,
        'stack': IterativeRenderedTextCollector,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown collection strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](provider, exclude_filter)
