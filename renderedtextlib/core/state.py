"""Mutable state threaded through one rendered text collection."""

from dataclasses import dataclass


@dataclass
class TraversalState:
    """Flags carried from node to node during a single collection.

    One instance belongs to one top-level collection and is mutated in
    place as the traversal proceeds; it must never be shared between
    concurrent collections. Siblings depend on each other through it
    (mainly via the trailing whitespace decision), so the traversal is
    strictly sequential.

    The table flags are set on entering a table, row, cell or caption and
    reset unconditionally on leaving it - they are not saved and restored.
    A table nested inside another table's cell therefore clears the outer
    table's context when it ends.
    """

    within_table: bool = False
    within_table_content: bool = False
    first_table_row: bool = True
    first_table_cell: bool = True
    may_start_with_whitespace: bool = False
    did_truncate_trailing_whitespace: bool = False

    def break_line(self) -> None:
        """Record a forced line start: nothing deferred, leading space trimmable."""
        self.did_truncate_trailing_whitespace = False
        self.may_start_with_whitespace = True
