from typing import Callable, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def map_optional(value: Optional[T], fn: Callable[[T], U]) -> Optional[U]:
    """Apply fn to value unless it is None."""
    return fn(value) if value is not None else None
