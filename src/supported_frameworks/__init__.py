"""Valid target framework choices for project configuration properties."""

from .errors import (
    FrameworkValuesError,
    MissingRequiredProperty,
    MissingRequiredTable,
    MSBuildEvaluationError,
    SnapshotFormatError,
)
from .models import Snapshot, Table, ValueEntry
from .natural import compare_natural, natural_key
from .provider import FrameworkEnumProvider, SupportedTargetFrameworksProvider
from .registry import ProviderRegistry, enum_provider, get_global_registry
from .rules import DEFAULT_RULES, FrameworkFamily, FrameworkRules
from .transform import classify_identifier, transform_supported_values

__all__ = [
    "FrameworkValuesError",
    "MissingRequiredProperty",
    "MissingRequiredTable",
    "MSBuildEvaluationError",
    "SnapshotFormatError",
    "Snapshot",
    "Table",
    "ValueEntry",
    "compare_natural",
    "natural_key",
    "FrameworkEnumProvider",
    "SupportedTargetFrameworksProvider",
    "ProviderRegistry",
    "enum_provider",
    "get_global_registry",
    "DEFAULT_RULES",
    "FrameworkFamily",
    "FrameworkRules",
    "classify_identifier",
    "transform_supported_values",
]
