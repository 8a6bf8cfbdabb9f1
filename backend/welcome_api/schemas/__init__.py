"""Pydantic Schemas — response contracts for the API endpoints.

Invariants:
    - Schemas describe the wire shape; values are produced in core/
"""
