"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from typing import Any


def _plain(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class BaseEntity:
    """Base class for all entities. Entities are immutable values."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a plain dictionary (sets become sorted lists)."""
        return _plain(asdict(self))
