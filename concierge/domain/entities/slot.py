from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Slot:
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24h
