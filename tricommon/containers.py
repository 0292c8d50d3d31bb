# tricommon/containers.py
"""
Convenience operations over mappings and sequences.

The mapping helpers accept any `collections.abc.Mapping`, so insertion-ordered
dicts, `OrderedDict`, read-only proxies and custom hash-based mappings all go
through the same code. "Ordered" results follow the mapping's own iteration
order.
"""
from collections.abc import Hashable
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Mapping,
    MutableMapping,
    Sequence,
    Tuple,
    TypeVar,
)

from tricommon.exceptions import LengthMismatchError
from tricommon.utils.logger import setup_logger

logger = setup_logger(__name__)

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_MISSING = object()


def retrieve_or_default(mapping: Mapping[K, V], key: K, default_val: V) -> V:
    """Returns `mapping[key]` if present, else `default_val`.

    Membership is tested first, so `defaultdict` factories and `__missing__`
    hooks are never triggered and the mapping is never mutated.
    """
    if key in mapping:
        return mapping[key]
    return default_val


def check_all_strings_for_substring(strings: Iterable[str], substring: str) -> bool:
    """Returns True if `substring` occurs in every string of `strings`.

    An empty collection is vacuously true; an empty substring matches anything.
    """
    return all(substring in candidate_string for candidate_string in strings)


class _Membership:
    """Set lookup for hashable items, equality scan for the rest."""

    def __init__(self, items: Iterable[Any]):
        self._hashed = set()
        self._unhashable: List[Any] = []
        for item in items:
            if isinstance(item, Hashable):
                try:
                    self._hashed.add(item)
                    continue
                except TypeError:
                    # e.g. a tuple holding a list
                    pass
            self._unhashable.append(item)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Hashable):
            try:
                if item in self._hashed:
                    return True
            except TypeError:
                pass  # hashable container with unhashable contents
        return any(item == other for other in self._unhashable)


def is_subset(collection: Iterable[T], candidate_subset: Iterable[T]) -> bool:
    """Returns True if every element of `candidate_subset` appears in `collection`.

    Only membership matters: duplicates and order are ignored on both sides,
    and an empty candidate is always a subset.

    :param collection: The elements to test against.
    :param candidate_subset: The elements that must all be present.
    :rtype: bool
    """
    members = _Membership(collection)
    return all(item in members for item in candidate_subset)


def sets_equal(set1: Iterable[T], set2: Iterable[T]) -> bool:
    """Returns True if both collections hold the same distinct elements."""
    set1, set2 = list(set1), list(set2)
    return is_subset(set1, set2) and is_subset(set2, set1)


def get_keys(mapping: Mapping[K, V]) -> List[K]:
    """Returns the keys of `mapping` in its iteration order."""
    return list(mapping.keys())


def get_keys_and_values(mapping: Mapping[K, V]) -> List[Tuple[K, V]]:
    """Returns `(key, value)` pairs of `mapping` in its iteration order."""
    return list(mapping.items())


def make_from_keys_and_values(
    keys_or_pairs: Iterable[Any],
    values: Any = _MISSING,
    *,
    factory: Callable[[], MutableMapping[K, V]] = dict,
    sort_keys: bool = True,
) -> MutableMapping[K, V]:
    """Builds a mapping from key/value pairs or from parallel key and value sequences.

    Called with one argument, `keys_or_pairs` is an iterable of `(key, value)`
    pairs. Called with two, `keys_or_pairs` holds the keys and `values` the
    values, matched by position.

    By default the result iterates in ascending key order, like a
    comparator-ordered map. With `sort_keys=False` pairs are inserted in input
    order instead. Either way, when a key repeats the later value wins.

    :param keys_or_pairs: Pairs, or the keys when `values` is given.
    :param values: Values matching `keys_or_pairs` position by position.
    :param factory: Zero-argument constructor of the mapping to fill.
    :param sort_keys: Insert in ascending key order; False keeps input order.
    :return: The newly built mapping.
    :raises LengthMismatchError: If keys and values differ in length.
    """
    if values is _MISSING:
        pairs: List[Tuple[Any, Any]] = [tuple(pair) for pair in keys_or_pairs]
    else:
        keys: Sequence[Any] = list(keys_or_pairs)
        values = list(values)
        if len(keys) != len(values):
            raise LengthMismatchError(len(keys), len(values))
        pairs = list(zip(keys, values))

    if sort_keys:
        # Stable sort keeps duplicate keys in input order, so last-write-wins holds.
        pairs.sort(key=lambda pair: pair[0])

    mapping = factory()
    for key, value in pairs:
        if key in mapping:
            logger.debug(f"Duplicate key {key!r}; keeping the later value")
        mapping[key] = value
    return mapping
