"""Schema coercion: turn a raw ruleset mapping into typed values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator

from cssrules.config import DEFAULT_CONFIG, RulesetConfig
from cssrules.errors import CoercionError
from cssrules.parser import parse_ruleset

__all__ = ["Coercer", "Schema", "through_schema"]

Coercer = Callable[[Any], Any]


def through_schema(
    schema: Mapping[str, Coercer], raw: Mapping[str, str | None]
) -> dict[str, Any]:
    """Apply each schema coercer to the matching raw value.

    The output has exactly the schema's keys. Omitted attributes are passed
    to their coercer as ``None``; raw keys outside the schema are dropped.
    """
    parsed: dict[str, Any] = {}
    for key, coerce in schema.items():
        value = raw.get(key)
        try:
            parsed[key] = coerce(value)
        except Exception as exc:
            raise CoercionError(key, value) from exc
    return parsed


class Schema(Mapping[str, Coercer]):
    """A reusable mapping of attribute name to coercer.

    Calling a schema parses a ruleset string and coerces it::

        shape = Schema({"fill": string, "opacity": optional(number, "1")})
        shape("fill: red")  # {"fill": "red", "opacity": 1.0}
    """

    def __init__(
        self, fields: Mapping[str, Coercer], config: RulesetConfig | None = None
    ) -> None:
        self._fields = dict(fields)
        self.config = config or DEFAULT_CONFIG

    @property
    def fields(self) -> dict[str, Coercer]:
        return dict(self._fields)

    def __getitem__(self, key: str) -> Coercer:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Schema({list(self._fields)!r})"

    def coerce(self, raw: Mapping[str, str | None]) -> dict[str, Any]:
        return through_schema(self._fields, raw)

    def parse(self, ruleset: str | None) -> dict[str, Any]:
        return self.coerce(parse_ruleset(ruleset, self.config))

    def __call__(self, ruleset: str | None) -> dict[str, Any]:
        return self.parse(ruleset)
