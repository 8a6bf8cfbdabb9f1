"""Route Modules — one file per endpoint concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never build payloads inline (delegate to core/status_payloads)
"""
