from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    """
    the contract shared by every node of a lazy chain.

    a node is either the base sequence, which owns a copy of the wrapped list,
    or a stage holding exactly one source node plus one callable. nodes never
    change after construction: map() and filter() always return a new stage,
    so a source can feed any number of independent chains.
    """

    def __init__(self):
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @property
    @abstractmethod
    def length(self) -> int:
        """number of elements a full traversal emits"""
        pass

    @abstractmethod
    def for_each(self, visit: Visitor[T]) -> None:
        """push every element, with its base-collection index, into visit"""
        pass

    @abstractmethod
    def to_array(self) -> List[T]:
        """materialize into a new list"""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """number of stages between this node and the base sequence"""
        pass

    def map(self, transform: Transform[T, U]) -> 'MapSequence[T, U]':
        """lazily apply transform(element, index) to each element"""
        stage = MapSequence(self, transform)
        logger.debug("built map stage at depth %d", stage._depth)
        return stage

    def filter(self, predicate: Predicate[T]) -> 'FilterSequence[T]':
        """lazily keep only the elements satisfying predicate"""
        stage = FilterSequence(self, predicate)
        logger.debug("built filter stage at depth %d", stage._depth)
        return stage

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        # every loop re-runs the chain; nothing is cached between traversals
        return iter(self.to_array())

# --- base sequence ---

class LazySequence(ISequence[T]):
    """wraps a list and is the root of every lazy chain."""

    def __init__(self, collection: Optional[Iterable[T]] = None):
        super().__init__()
        self._storage: List[T] = list(collection) if collection is not None else []

    @property
    def length(self) -> int:
        return len(self._storage)

    @property
    def depth(self) -> int:
        return 0

    def for_each(self, visit: Visitor[T]) -> None:
        for index, element in enumerate(self._storage):
            visit(element, index)

    def to_array(self) -> List[T]:
        return list(self._storage)

    def __repr__(self) -> str:
        return f"LazySequence(length={len(self._storage)})"

# --- stages ---

class _Stage(ISequence[U]):
    """
    shared traversal for map and filter stages.

    the chain is unwound into a flat list of steps once per traversal and
    every base element is pushed through all of them in a loop, so neither
    building nor running a chain recurses per stage.
    """

    def __init__(self, source: ISequence[Any]):
        super().__init__()
        self.source = source
        self._depth = source.depth + 1

    @property
    def depth(self) -> int:
        return self._depth

    def _unwind(self) -> Tuple[LazySequence[Any], List[Tuple[bool, Callable]]]:
        """base node plus (is_map, callable) steps in chain order"""
        steps = []
        node = self
        while isinstance(node, _Stage):
            steps.append(node._step())
            node = node.source
        steps.reverse()
        return node, steps

    @abstractmethod
    def _step(self) -> Tuple[bool, Callable]:
        pass

    def for_each(self, visit: Visitor[U]) -> None:
        base, steps = self._unwind()
        for index, element in enumerate(base._storage):
            for is_map, func in steps:
                if is_map:
                    element = func(element, index)
                elif not func(element):
                    break
            else:
                visit(element, index)

    def to_array(self) -> List[U]:
        result: List[U] = []
        append = result.append
        self.for_each(lambda element, index: append(element))
        return result


class MapSequence(_Stage[U], Generic[T, U]):
    """
    projects each element emitted by the source.

    the index handed to transform and to visitors is the one the source emits,
    i.e. the position in the base collection. downstream of a filter these
    indices are sparse; to_array() still packs its results densely.
    """

    def __init__(self, source: ISequence[T], transform: Transform[T, U]):
        super().__init__(source)
        self.transform = transform

    def _step(self) -> Tuple[bool, Callable]:
        return True, self.transform

    @property
    def length(self) -> int:
        # mapping never changes the element count; skip straight past map stages
        node = self.source
        while isinstance(node, MapSequence):
            node = node.source
        return node.length

    def __repr__(self) -> str:
        return f"MapSequence(depth={self._depth})"


class FilterSequence(_Stage[T]):
    """passes through only the source elements that satisfy the predicate."""

    def __init__(self, source: ISequence[T], predicate: Predicate[T]):
        super().__init__(source)
        self.should_include = predicate

    def _step(self) -> Tuple[bool, Callable]:
        return False, self.should_include

    @property
    def length(self) -> int:
        """counted by a full traversal, so the predicate runs again on every call"""
        count = 0

        def tally(element: T, index: int) -> None:
            nonlocal count
            count += 1

        self.for_each(tally)
        return count

    def __repr__(self) -> str:
        return f"FilterSequence(depth={self._depth})"
