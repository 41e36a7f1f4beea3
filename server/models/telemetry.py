"""Telemetry domain types and physical constraints"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

# A reading is kept exactly as it was received (no coercion)
Reading = Dict[str, Any]

NUMERIC_FIELDS: Tuple[str, ...] = ("depth", "pressure", "temperature", "direction")
REQUIRED_FIELDS: Tuple[str, ...] = NUMERIC_FIELDS + ("timestamp",)


@dataclass(frozen=True)
class FieldRange:
    """Inclusive physical domain of a numeric field"""
    minimum: float
    maximum: float
    unit: str

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def describe(self) -> str:
        return f"{self.minimum:g}-{self.maximum:g} {self.unit}"


FIELD_RANGES: Dict[str, FieldRange] = {
    "depth": FieldRange(0, 30, "meters"),
    "pressure": FieldRange(1, 4, "bar"),
    "temperature": FieldRange(5, 25, "°C"),
    "direction": FieldRange(0, 360, "degrees"),
}


@dataclass(frozen=True)
class Defect:
    """A single validation failure for one field"""
    field: str
    message: str

    def __str__(self) -> str:
        return self.message
