from .types import *
from .sequence import LazySequence

def wrap(collection: Optional[Iterable[T]] = None) -> LazySequence[T]:
    """wrap a collection so lazy operations can be chained on it"""
    return LazySequence(collection)

def from_iterable(data: Iterable[T]) -> LazySequence[T]:
    """create a sequence from any iterable, consuming it once"""
    return LazySequence(data)

def from_range(start: int, count: int) -> LazySequence[int]:
    """create sequence from range"""
    return LazySequence(range(start, start + count))

def repeat(item: T, count: int) -> LazySequence[T]:
    """create sequence with repeated item"""
    return LazySequence([item] * count)

def empty() -> LazySequence[Any]:
    """create empty sequence"""
    return LazySequence()

# --- aliases ---
lazy = wrap
L = wrap
