from .default import value_or_default, lookup_any

__all__ = ["value_or_default", "lookup_any"]
