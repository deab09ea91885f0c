"""
Core value type, arithmetic primitives, and invariants.

Pure computation over immutable values; no I/O and no global mutable state.
"""
