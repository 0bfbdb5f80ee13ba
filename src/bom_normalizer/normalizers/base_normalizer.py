"""
Base classes and shared helpers for the normalizers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from ..config import AppConfig, get_config

if TYPE_CHECKING:
    from .factory import Factory


@dataclass(frozen=True)
class NormalizerOptions:
    """
    Options shared by every normalizer of one pass.

    Attributes:
        sort_lists: Order every list and the dependency graph
            deterministically instead of keeping insertion order
    """

    sort_lists: bool = False

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> "NormalizerOptions":
        """Build options from the application configuration."""
        config = config or get_config()
        return cls(sort_lists=bool(config.normalizer.sort_lists))


class BaseNormalizer(ABC):
    """
    Abstract base class for all normalizers.

    A normalizer maps one model object to a plain value ready for
    serialization, or to ``None`` when the object has to be left out for
    the target spec version. Normalizers are bound to a ``Factory`` and
    reach the spec capabilities and sibling normalizers through it.
    """

    def __init__(self, factory: "Factory"):
        self._factory = factory

    @property
    def factory(self) -> "Factory":
        return self._factory

    @abstractmethod
    def normalize(self, data: Any, options: NormalizerOptions) -> Optional[Any]:
        """
        Normalize one model object.

        Args:
            data: Model object to normalize
            options: Options of the current pass

        Returns:
            Normalized value, or None if the object is omitted
        """

    def _ordered(self, data: Any, options: NormalizerOptions) -> List[Any]:
        """Get the elements of a collection in output order."""
        return data.sorted() if options.sort_lists else list(data)

    def _normalize_ordered(self, data: Any, options: NormalizerOptions) -> List[Any]:
        """Normalize each element in output order, dropping omitted ones."""
        normalized = (self.normalize(item, options) for item in self._ordered(data, options))
        return [item for item in normalized if item is not None]


def omit_absent(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop the keys whose value is None.

    None marks an omitted field. Empty strings and empty lists are kept,
    so callers decide themselves when an empty value collapses.
    """
    return {key: value for key, value in fields.items() if value is not None}


def optional_string(value: Optional[str]) -> Optional[str]:
    """Treat an empty string like a missing one."""
    return value if value else None


def normalize_stringable_iter(data: Iterable[Any], options: NormalizerOptions) -> List[str]:
    """
    Convert values to strings, sorted when the options ask for it.

    Args:
        data: Values with a meaningful ``str()``
        options: Options of the current pass

    Returns:
        List of string forms
    """
    result = [str(item) for item in data]
    if options.sort_lists:
        result.sort()
    return result


def optional_list(values: List[Any]) -> Optional[List[Any]]:
    """Treat a list that ended up empty like a missing one."""
    return values if values else None
