from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    Dict, List, Set, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Transform = Callable[[T, int], U]
Visitor = Callable[[T, int], None]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
