# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Ids and "current time" come from the environment. The core only sees these
Protocols, which keeps tests deterministic (fixed clock, sequential ids).
"""

import uuid
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class IdProvider(Protocol):
    def new_id(self) -> str: ...


class SystemClock:
    """Local wall-clock time (day buckets follow the user's calendar day)."""

    def now(self) -> datetime:
        return datetime.now()


class UuidIdProvider:
    def new_id(self) -> str:
        return str(uuid.uuid4())
