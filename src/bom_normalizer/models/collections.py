"""
Collection types used by the BOM object graph.
"""

from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .hash import HashAlgorithm

T = TypeVar("T")


class SortableSet(Generic[T]):
    """
    Insertion-ordered set of model objects.

    Duplicates collapse on insert. Iteration preserves insertion order,
    while ``sorted()`` orders the elements by their ``sort_key()``.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[T, None] = dict.fromkeys(items)

    def add(self, item: T) -> None:
        self._items[item] = None

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def discard(self, item: T) -> None:
        self._items.pop(item, None)

    def sorted(self) -> List[T]:
        """
        Get the elements in their natural order.

        Returns:
            New list sorted by each element's ``sort_key()``
        """
        return sorted(self._items, key=_natural_key)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"


class HashDict(Dict[HashAlgorithm, str]):
    """Hash contents keyed by algorithm; one content per algorithm."""

    def __init__(self, hashes: Optional[Any] = None):
        super().__init__()
        for algorithm, content in dict(hashes or {}).items():
            self[algorithm] = content

    def __setitem__(self, algorithm: Any, content: str) -> None:
        if not isinstance(algorithm, HashAlgorithm):
            algorithm = HashAlgorithm(algorithm)
        super().__setitem__(algorithm, content)

    def sorted(self) -> List[Tuple[HashAlgorithm, str]]:
        """Get ``(algorithm, content)`` pairs ordered by algorithm name, then content."""
        return sorted(self.items(), key=lambda item: (item[0].value, item[1]))


def _natural_key(item: Any) -> Any:
    sort_key = getattr(item, "sort_key", None)
    if sort_key is None:
        return item
    return sort_key()


def ensure_sortable_set(value: Optional[Iterable[T]]) -> SortableSet[T]:
    """Wrap a plain iterable into a ``SortableSet`` unless it already is one."""
    if isinstance(value, SortableSet):
        return value
    return SortableSet(value or ())
