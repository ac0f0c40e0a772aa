from .invariants import debug_check, in_unit_range

__all__ = ["debug_check", "in_unit_range"]
