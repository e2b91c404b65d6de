"""Enumerated value providers for project configuration properties."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from .errors import FrameworkValuesError
from .models import Snapshot, ValueEntry
from .rules import DEFAULT_RULES, FrameworkRules
from .transform import (
    EntryComparer,
    RowMapper,
    compare_by_display_name,
    transform_supported_values,
)

__all__ = ["FrameworkEnumProvider", "SupportedTargetFrameworksProvider"]

log = logging.getLogger(__name__)


@runtime_checkable
class FrameworkEnumProvider(Protocol):
    """What the host needs from a provider of listed property values.

    The host delivers a snapshot containing every table in ``rule_names``
    and calls ``transform``. When ``transform`` raises, the host asks
    ``result`` for the option set to show instead.
    """

    @property
    def rule_names(self) -> Tuple[str, ...]: ...

    @property
    def allow_custom_values(self) -> bool: ...

    def transform(self, snapshot: Snapshot) -> List[ValueEntry]: ...

    def result(self, error: BaseException) -> List[ValueEntry]: ...

    def try_create_value(self, text: str) -> Optional[ValueEntry]: ...


@dataclass(frozen=True, slots=True)
class SupportedTargetFrameworksProvider:
    """Valid values for the ``TargetFramework`` property from evaluation."""

    rules: FrameworkRules = DEFAULT_RULES
    to_value: Optional[RowMapper] = None
    compare: EntryComparer = compare_by_display_name

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return self.rules.rule_names

    @property
    def allow_custom_values(self) -> bool:
        return False

    def transform(self, snapshot: Snapshot) -> List[ValueEntry]:
        return transform_supported_values(
            snapshot,
            rules=self.rules,
            to_value=self.to_value,
            compare=self.compare,
        )

    def result(self, error: BaseException) -> List[ValueEntry]:
        if not isinstance(error, FrameworkValuesError):
            raise error
        log.warning("Supported target frameworks unavailable: %s", error)
        return []

    def try_create_value(self, text: str) -> Optional[ValueEntry]:
        return None
