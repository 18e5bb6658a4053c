"""Composite pattern - leaves and containers share one ``operation`` contract.

A client treats a single ``Leaf`` and a whole ``Composite`` tree the same way:
both answer ``operation()``. A composite's answer is its children's answers
joined in insertion order.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from pattern_gallery.domain.core.exceptions import CyclicCompositionError


class Component(ABC):
    """Node of a part-whole hierarchy."""

    @abstractmethod
    def operation(self) -> str:
        """Describe this node and everything below it."""


class Leaf(Component):
    """Terminal node."""

    def __init__(self, name: str) -> None:
        self.name = name

    def operation(self) -> str:
        return f"Leaf: {self.name}"

    def __repr__(self) -> str:
        return f"Leaf({self.name!r})"


class Composite(Component):
    """Container node holding an ordered list of child components."""

    def __init__(self) -> None:
        self._children: List[Component] = []

    @property
    def children(self) -> Tuple[Component, ...]:
        """Snapshot of the direct children in insertion order."""
        return tuple(self._children)

    def add(self, component: Component) -> None:
        """
        Append a child.

        The same component may be added more than once. Adding this
        composite to itself, or to any composite below it, is rejected.

        Raises:
            CyclicCompositionError: If the insertion would create a cycle
        """
        if component is self or (
            isinstance(component, Composite) and component.contains(self)
        ):
            raise CyclicCompositionError(self, component)
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Remove every occurrence of ``component``, compared by identity.

        Removing a component that is not a child does nothing.
        """
        self._children = [child for child in self._children if child is not component]

    def contains(self, component: Component) -> bool:
        """Check whether ``component`` is this node's descendant (identity).

        Walks the tree with an explicit stack, so depth is not limited by
        the interpreter's recursion limit.
        """
        stack: List[Composite] = [self]
        visited = set()
        while stack:
            node = stack.pop()
            if id(node) in visited:
                continue
            visited.add(id(node))
            for child in node._children:
                if child is component:
                    return True
                if isinstance(child, Composite):
                    stack.append(child)
        return False

    def operation(self) -> str:
        # (composite, remaining children, rendered children) per open level
        stack = [(self, iter(self._children), [])]
        while True:
            _, children, parts = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                rendered = "Composite: [" + ", ".join(parts) + "]"
                if not stack:
                    return rendered
                stack[-1][2].append(rendered)
            elif isinstance(child, Composite):
                stack.append((child, iter(child._children), []))
            else:
                parts.append(child.operation())

    def __iter__(self) -> Iterator[Component]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"Composite(children={len(self._children)})"
