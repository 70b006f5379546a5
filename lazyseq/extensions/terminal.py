from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import ISequence

logger = logging.getLogger(__name__)

_MISSING = object()


class _Found(Exception):
    """unwinds a traversal early; carries the element that ended it"""

    def __init__(self, element: Any):
        super().__init__()
        self.element = element


class TerminalAccessor(Generic[T]):
    """
    terminal operations, all driven by the sequence's for_each.

    every call runs the whole chain again from the base. searches (any, all,
    first) stop pushing elements as soon as their answer is known.
    """

    def __init__(self, sequence_instance: 'ISequence[T]'):
        self._sequence = sequence_instance

    def _search(self, predicate: Predicate[T]) -> Any:
        """first element satisfying predicate, or _MISSING"""
        def visit(element: T, index: int) -> None:
            if predicate(element):
                raise _Found(element)

        try:
            self._sequence.for_each(visit)
        except _Found as found:
            return found.element
        return _MISSING

    def list(self) -> List[T]:
        """materialize into a new list"""
        logger.debug("materializing %r", self._sequence)
        return self._sequence.to_array()

    def array(self) -> np.ndarray:
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        return pd.DataFrame(self.list())

    def set(self) -> Set[T]:
        result = set()
        self._sequence.for_each(lambda element, index: result.add(element))
        return result

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """later elements overwrite earlier ones with the same key"""
        result = {}

        def visit(element: T, index: int) -> None:
            result[key_selector(element)] = value_selector(element) if value_selector else element

        self._sequence.for_each(visit)
        return result

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        count = 0

        def visit(element: T, index: int) -> None:
            nonlocal count
            if predicate is None or predicate(element):
                count += 1

        self._sequence.for_each(visit)
        return count

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        return self._search(predicate or (lambda element: True)) is not _MISSING

    def all(self, predicate: Predicate[T]) -> bool:
        return self._search(lambda element: not predicate(element)) is _MISSING

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        found = self._search(predicate or (lambda element: True))
        if found is _MISSING:
            if predicate is None: raise ValueError("sequence contains no elements")
            raise ValueError("no element satisfies the condition")
        return found

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        found = self._search(predicate or (lambda element: True))
        return default if found is _MISSING else found

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """left fold; the first element seeds the fold when no seed is given"""
        acc = _MISSING if seed is None else seed

        def visit(element: T, index: int) -> None:
            nonlocal acc
            acc = element if acc is _MISSING else accumulator(acc, element)

        self._sequence.for_each(visit)
        if acc is _MISSING: raise ValueError("cannot aggregate empty sequence without seed")
        return acc
