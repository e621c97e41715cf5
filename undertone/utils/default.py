from typing import Any, Mapping, Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def lookup_any(mapping: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present in ``mapping`` with a non-None value."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None
