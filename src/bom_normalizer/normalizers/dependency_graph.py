"""
Dependency graph normalizer.

Flattens the dependency declarations of every component in a BOM, nested
ones included, into one adjacency list for the document-level
``dependencies`` section.
"""

import logging
from itertools import chain
from typing import Any, Dict, List

from ..models import Bom, BomRef, Component, SortableSet, iter_component_tree
from .base_normalizer import BaseNormalizer, NormalizerOptions, normalize_stringable_iter

logger = logging.getLogger(__name__)


class DependencyGraphNormalizer(BaseNormalizer):
    """
    Normalizer that builds the document-level dependency graph.

    Every target listed in an entry's ``dependsOn`` is itself the ``ref`` of
    an emitted entry. Edges that would break this, pointing at unknown or
    unaddressable components or back at the component itself, are
    dropped without raising.
    """

    def normalize(self, data: Bom, options: NormalizerOptions) -> List[Dict[str, Any]]:
        """
        Build the dependency graph of a BOM.

        Args:
            data: BOM whose components to walk
            options: Options of the current pass

        Returns:
            One entry per addressable component, in walk order or sorted
            by ``ref`` when ``options.sort_lists`` is set
        """
        all_refs = self._collect(data)

        normalized: List[Dict[str, Any]] = []
        dropped_edges = 0
        for ref, deps in all_refs.items():
            if not ref.is_assigned:
                # no value -> cannot be rendered as a graph node
                continue

            depends_on = [
                target for target in normalize_stringable_iter(
                    (d for d in deps if d in all_refs and d != ref),
                    options
                )
                if len(target) > 0
            ]
            dropped_edges += len(deps) - len(depends_on)

            entry: Dict[str, Any] = {"ref": ref.value}
            if depends_on:
                entry["dependsOn"] = depends_on
            normalized.append(entry)

        if options.sort_lists:
            normalized.sort(key=lambda entry: entry["ref"])

        if dropped_edges:
            logger.debug(
                f"Dropped {dropped_edges} dangling, unaddressable or self dependency edges",
                extra={"spec_version": self._factory.spec.version.value, "dropped_edges": dropped_edges}
            )

        return normalized

    def _collect(self, data: Bom) -> Dict[BomRef, SortableSet[BomRef]]:
        """
        Map each reachable component's ref to its declared dependencies.

        The metadata component and its subtree come first, then the
        top-level components and their subtrees, all in pre-order.
        Components the target version cannot express are left out
        together with their subtrees, as they are missing from the
        normalized component tree too. A ref seen twice keeps its first
        position and its last dependency set.
        """
        spec = self._factory.spec

        def unsupported(component: Component) -> bool:
            return not spec.supports_component_type(component.type)

        roots: List[Component] = []
        if data.metadata.component is not None:
            roots.append(data.metadata.component)

        all_refs: Dict[BomRef, SortableSet[BomRef]] = {}
        for component in chain(
            iter_component_tree(roots, prune=unsupported),
            iter_component_tree(data.components, prune=unsupported)
        ):
            all_refs[component.bom_ref] = component.dependencies
        return all_refs
