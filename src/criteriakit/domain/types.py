"""Type aliases for criteria building blocks.

Python 3.12+ PEP 695 type alias syntax.
Predicate: takes item, returns True to keep.
KeySelector: takes item, returns the value to sort by.
"""

from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]
type KeySelector[T] = Callable[[T], object]
