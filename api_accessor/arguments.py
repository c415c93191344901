"""
Argument Collection
===================
Immutable store of request parameters used as the single source for
canonicalization.
"""

from types import MappingProxyType
from typing import Any, Collection, Iterable, Iterator, Mapping, Optional, Tuple

from .models import Argument


def _iter_pairs(source: Any) -> Iterator[Tuple[str, str]]:
    """
    Yield (key, value) pairs from a raw parameter source.

    Accepts multidicts exposing ``multi_items()`` (Starlette ``QueryParams``),
    plain mappings whose values are strings or sequences of strings (the
    shape produced by ``urllib.parse.parse_qs``), and iterables of pairs.
    """
    if hasattr(source, "multi_items"):
        yield from source.multi_items()
        return

    items = source.items() if isinstance(source, Mapping) else source
    for key, value in items:
        if isinstance(value, (list, tuple)):
            # Repeated keys collapse to the last value
            for item in value:
                yield key, item
        else:
            yield key, value


class Arguments:
    """
    Request arguments keyed by name, plus the order they arrived in.

    Duplicate keys keep the last value seen. The collection offers no way
    to change its contents once built.
    """

    __slots__ = ("_kv", "_sequence")

    def __init__(self, source: Any = ()):
        kv = {}
        sequence = []
        for key, value in _iter_pairs(source):
            key, value = str(key), str(value)
            kv[key] = value
            sequence.append(Argument(key=key, value=value))
        self._kv = MappingProxyType(kv)
        self._sequence = tuple(sequence)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._kv.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self._kv[key]

    def __contains__(self, key: object) -> bool:
        return key in self._kv

    def __len__(self) -> int:
        return len(self._kv)

    def __iter__(self) -> Iterator[str]:
        return iter(self._kv)

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the arguments by key."""
        return self._kv

    @property
    def sequence(self) -> Tuple[Argument, ...]:
        """Every argument in arrival order, duplicates included."""
        return self._sequence

    def items(self, exclude: Collection[str] = ()) -> Iterable[Tuple[str, str]]:
        """Return (key, value) pairs, skipping keys listed in ``exclude``."""
        return [(k, v) for k, v in self._kv.items() if k not in exclude]

    def missing(self, required: Iterable[str]) -> Tuple[str, ...]:
        """Return the required keys that are absent."""
        return tuple(key for key in required if key not in self._kv)

    def __repr__(self) -> str:
        return f"Arguments(keys={sorted(self._kv)!r})"
