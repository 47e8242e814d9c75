"""Minimal construct tree used to parent scalable targets and attributes."""

from typing import List, Optional


class Construct:
    """A named node in a construct tree.

    Children register themselves with their scope on creation; ids must be
    unique among siblings.
    """

    def __init__(self, scope: Optional["Construct"], id: str) -> None:  # pylint: disable=redefined-builtin
        if not id:
            raise ValueError("construct id must be a non-empty string")
        self.scope = scope
        self.id = id
        self.children: List["Construct"] = []
        if scope is not None:
            scope._add_child(self)

    def _add_child(self, child: "Construct") -> None:
        if any(c.id == child.id for c in self.children):
            raise ValueError(f"There is already a construct with id '{child.id}' in {self.path or '<root>'}")
        self.children.append(child)

    @property
    def path(self) -> str:
        """Slash-separated ids from the root (root itself excluded)."""
        if self.scope is None:
            return ""
        parent = self.scope.path
        return f"{parent}/{self.id}" if parent else self.id

    def find_child(self, id: str) -> Optional["Construct"]:  # pylint: disable=redefined-builtin
        """Return the direct child named `id`, or None."""
        for c in self.children:
            if c.id == id:
                return c
        return None
