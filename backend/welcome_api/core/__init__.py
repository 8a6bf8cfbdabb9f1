"""Core Layer — pure response construction and the process clock, no IO.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Functions take the current instant as an argument (deterministic under test)
"""
