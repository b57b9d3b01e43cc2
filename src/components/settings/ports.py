"""
Settings component port definitions.
"""

from __future__ import annotations

from src.components.durable_store import SlotPort
from src.domain.entities import AppSettings

SettingsSlotPort = SlotPort[AppSettings]
