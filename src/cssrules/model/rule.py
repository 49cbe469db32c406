from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rule:
    """A single ``key:value`` declaration in source order.

    ``value`` is ``None`` when the declaration had no key separator.
    """

    key: str
    value: str | None

    @property
    def is_malformed(self) -> bool:
        return self.value is None or not self.key
