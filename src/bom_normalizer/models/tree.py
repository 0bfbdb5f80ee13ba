"""
Pre-order traversal over nested component trees.
"""

from typing import Callable, Iterable, Iterator, List, Optional

from .component import Component


def iter_component_tree(
    components: Iterable[Component],
    prune: Optional[Callable[[Component], bool]] = None
) -> Iterator[Component]:
    """
    Walk a component forest in pre-order.

    Each component is yielded before its nested components, siblings in
    collection order. The walk keeps its own stack, so nesting depth is
    not limited by the interpreter's recursion limit. Calling the
    function again starts a fresh walk.

    Args:
        components: Top-level components to walk
        prune: Optional predicate; a component for which it returns True
            is skipped together with its whole subtree

    Yields:
        Every visited component, exactly once per occurrence
    """
    stack: List[Iterator[Component]] = [iter(components)]
    while stack:
        component = next(stack[-1], None)
        if component is None:
            stack.pop()
            continue
        if prune is not None and prune(component):
            continue
        yield component
        if len(component.components) > 0:
            stack.append(iter(component.components))
