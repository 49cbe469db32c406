"""CSS unit value: a number paired with its unit token."""

from __future__ import annotations

from dataclasses import dataclass

UNIT_NONE = "none"
UNIT_UNDEFINED = "undefined"


@dataclass(frozen=True)
class CssUnit:
    """A parsed ``<number><unit>`` value such as ``10px`` or ``50%``.

    ``unit`` is the trailing unit token, ``"none"`` when a number had no
    unit, or ``"undefined"`` when no leading number was found (``value`` is
    then ``None``).
    """

    value: float | None
    unit: str

    @property
    def is_defined(self) -> bool:
        return self.unit != UNIT_UNDEFINED

    def __str__(self) -> str:
        if not self.is_defined:
            return UNIT_UNDEFINED
        if self.unit == UNIT_NONE:
            return f"{self.value:g}"
        return f"{self.value:g}{self.unit}"
