r"""
'    .__
'    |  | _____  ___________.__. ______ ____   ________
'    |  | \__  \ \___   <   |  |/  ___// __ \ / ____/
'    |  |__/ __ \_/    / \___  |\___ \\  ___/< <_|  |
'    |____(____  /_____ \/ ____/____  >\___  >__   |
'              \/      \/\/         \/     \/   |__|
"""

# expose the sequence classes
from .sequence import ISequence, LazySequence, MapSequence, FilterSequence

# expose the factory functions
from .factories import (
    wrap,
    from_iterable,
    from_range,
    repeat,
    empty,
    lazy,
    L
)

# expose the benchmarking helpers
from .bench import bench, compare, random_array

# define what `import *` does
__all__ = [
    "ISequence",
    "LazySequence",
    "MapSequence",
    "FilterSequence",
    "wrap",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "lazy",
    "L",
    "bench",
    "compare",
    "random_array"
]
