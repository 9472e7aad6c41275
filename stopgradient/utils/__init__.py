from .default import value_or_default, map_optional

__all__ = ["value_or_default", "map_optional"]
