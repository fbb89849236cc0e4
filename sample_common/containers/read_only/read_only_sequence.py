from __future__ import annotations
from collections.abc import Collection, Iterable
from dataclasses import dataclass
import logging
from typing import Any, Generic, Iterator, TypeVar, cast

from sample_common.typeutils.require import require_present

logger = logging.getLogger(__name__)

T = TypeVar("T")

@dataclass(frozen=True, init=False, eq=False, repr=False)
class ReadOnlySequence(Collection[T], Generic[T]):
    """
    An immutable, fixed-size ordered container exposing forward iteration only.

    The elements are copied into owned storage once, at construction. Nothing on the public
    surface can add, remove or replace an element afterwards, and there is no indexing: the
    container is traversed, measured and tested for membership, never addressed by position.
    Instances are frozen, so rebinding the internal storage raises as well.

    Nested contents are not recursively frozen. A contained list can still be mutated through
    any reference the caller kept to it.

    Attributes:
        _items (tuple[T, ...]):
            The owned copy of the elements, in construction order.
    """

    _items: tuple[T, ...]

    def __init__(self, *items: T):
        """
        Build a sequence holding exactly the given elements, in the given order.

        Args:
            *items (T):
                Zero or more elements.
        """
        object.__setattr__(self, "_items", tuple(items))

    @classmethod
    def from_iterable(cls, source: Iterable[T]) -> ReadOnlySequence[T]:
        """
        Build a sequence by eagerly consuming an arbitrary finite iterable.

        The source is traversed exactly once, here, and no reference to it is retained, so
        later changes to the source never show through. Any exception raised while the source
        is consumed propagates and no sequence is produced.

        Args:
            source (Iterable[T]):
                The elements to copy. A one-shot iterator is fully exhausted. Objects that only
                implement `__getitem__` are accepted, as they are by `iter()`.

        Returns:
            ReadOnlySequence[T]:
                A new sequence owning a copy of the elements.

        Raises:
            ValueError:
                If `source` is None.
            TypeError:
                If `source` is not iterable.
        """
        present = require_present(source, "source")
        try:
            iterator = iter(present)
        except TypeError as exc:
            raise TypeError(
                f"source: expected an iterable, got {type(present).__name__}"
            ) from exc

        items = tuple(iterator)
        logger.debug("Built %s from iterable with %d element(s)", cls.__name__, len(items))
        return cls(*items)

    def __iter__(self) -> Iterator[T]:
        for item in self._items:
            yield item

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(item) for item in self._items)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadOnlySequence):
            return NotImplemented
        # Cast is for the type checker only; T is not enforced at runtime
        return self._items == cast(ReadOnlySequence[Any], other)._items

    def __hash__(self) -> int:
        return hash(self._items)
