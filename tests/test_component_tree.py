from bom_normalizer.models import Component, SortableSet, iter_component_tree


def _names(components):
    return [c.name for c in components]


def _sample_forest():
    a1 = Component(type="library", name="a1")
    a2 = Component(type="library", name="a2", components=[Component(type="file", name="a2x")])
    a = Component(type="application", name="a", components=[a1, a2])
    b = Component(type="library", name="b")
    return [a, b]


def test_walks_in_pre_order() -> None:
    forest = _sample_forest()

    assert _names(iter_component_tree(forest)) == ["a", "a1", "a2", "a2x", "b"]


def test_walk_is_restartable() -> None:
    forest = SortableSet(_sample_forest())

    first = _names(iter_component_tree(forest))
    second = _names(iter_component_tree(forest))

    assert first == second


def test_prune_skips_whole_subtree() -> None:
    forest = _sample_forest()

    visited = iter_component_tree(forest, prune=lambda c: c.name == "a2")

    assert _names(visited) == ["a", "a1", "b"]


def test_deep_nesting_does_not_hit_recursion_limit() -> None:
    depth = 5000
    node = Component(type="library", name=f"c{depth}")
    for i in range(depth - 1, 0, -1):
        node = Component(type="library", name=f"c{i}", components=[node])

    visited = list(iter_component_tree([node]))

    assert len(visited) == depth
    assert visited[0].name == "c1"
    assert visited[-1].name == f"c{depth}"


def test_empty_forest_yields_nothing() -> None:
    assert list(iter_component_tree([])) == []
