"""Rule options: schema validation and one-time resolution into an immutable value object."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from max_params_linter.domain.constants import DEFAULT_COUNT_VOID_THIS, DEFAULT_MAX_PARAMS
from max_params_linter.domain.exceptions import InvalidOptionsError

_OBJECT_KEYS: frozenset[str] = frozenset({"maximum", "max", "countVoidThis"})


@dataclass(frozen=True)
class RuleOptions:
    """Resolved configuration. Immutable for the lifetime of one analysis run."""
    max_params: int = DEFAULT_MAX_PARAMS
    count_void_this: bool = DEFAULT_COUNT_VOID_THIS

    def __post_init__(self) -> None:
        if self.max_params < 0:
            raise InvalidOptionsError(f"max_params must be >= 0, got {self.max_params}")

    @classmethod
    def from_raw(cls, raw: object) -> RuleOptions:
        """
        Resolve an already-validated raw option value.

        Absent -> defaults; bare integer -> maximum; object -> `maximum`
        (falling back to its `max` alias) and `countVoidThis`. An explicit
        `maximum` wins even when it is 0.
        """
        if raw is None:
            return cls()
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cls(max_params=raw)
        if not isinstance(raw, Mapping):
            raise InvalidOptionsError(f"Unsupported option value: {raw!r}")

        max_params = DEFAULT_MAX_PARAMS
        maximum = raw.get("maximum")
        alias = raw.get("max")
        if maximum is not None:
            if alias is not None and alias != maximum:
                logging.warning(
                    "max-params: both 'maximum' (%s) and 'max' (%s) are set; using 'maximum'.",
                    maximum,
                    alias,
                )
            max_params = int(maximum)
        elif alias is not None:
            max_params = int(alias)

        count_void_this = bool(raw.get("countVoidThis", DEFAULT_COUNT_VOID_THIS))
        return cls(max_params=max_params, count_void_this=count_void_this)


class ConfigurationLoader:
    """
    Validates a raw option value against the option schema and resolves it once.

    Created by Infrastructure from an explicit value or from pyproject.toml.
    Accepted shapes: absent, a non-negative integer, or a mapping with only
    `maximum`/`max` (non-negative integers) and `countVoidThis` (boolean).
    """

    def __init__(self, raw_option: object = None) -> None:
        self.validate_config(raw_option)
        self._raw = raw_option
        self._options = RuleOptions.from_raw(raw_option)

    @staticmethod
    def _is_count(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0

    def validate_config(self, raw_option: object) -> None:
        """Raise InvalidOptionsError when raw_option does not match the schema."""
        if raw_option is None or self._is_count(raw_option):
            return
        if not isinstance(raw_option, Mapping):
            raise InvalidOptionsError(
                f"Expected a non-negative integer or an object, got {raw_option!r}"
            )
        unknown = sorted(str(k) for k in raw_option if k not in _OBJECT_KEYS)
        if unknown:
            raise InvalidOptionsError(
                f"Unexpected option propert{'ies' if len(unknown) > 1 else 'y'}: {', '.join(unknown)}"
            )
        for key in ("maximum", "max"):
            if key in raw_option and not self._is_count(raw_option[key]):
                raise InvalidOptionsError(
                    f"'{key}' must be a non-negative integer, got {raw_option[key]!r}"
                )
        if "countVoidThis" in raw_option and not isinstance(raw_option["countVoidThis"], bool):
            raise InvalidOptionsError(
                f"'countVoidThis' must be a boolean, got {raw_option['countVoidThis']!r}"
            )

    @property
    def raw(self) -> object:
        """Return the raw option value as given."""
        return self._raw

    @property
    def options(self) -> RuleOptions:
        """Return the resolved options."""
        return self._options
