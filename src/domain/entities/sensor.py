"""Sensor domain entity."""

from dataclasses import dataclass


@dataclass
class Sensor:
    """Domain entity for a paired device sensor."""

    id: str
    name: str = ""
