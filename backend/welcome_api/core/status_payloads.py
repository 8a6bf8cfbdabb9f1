"""Status Payloads — pure builders for the welcome and health bodies.

Invariants:
    - Welcome body is fixed apart from its timestamp
    - Health status is always "UP" when the process can answer
"""

from datetime import datetime

WELCOME_MESSAGE = "Welcome to our API!"
WELCOME_STATUS = "healthy"
HEALTH_STATUS = "UP"


def build_welcome(now: datetime) -> dict:
    return {
        "message": WELCOME_MESSAGE,
        "status": WELCOME_STATUS,
        "timestamp": now,
    }


def build_health(uptime: float, now: datetime) -> dict:
    """Health body for a process that has been up `uptime` seconds."""
    return {
        "status": HEALTH_STATUS,
        "uptime": uptime,
        "timestamp": now,
    }
