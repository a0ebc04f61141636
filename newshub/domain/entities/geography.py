"""Reference data describing Indian states and their districts."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class StateRecord:
    """A state (or union territory) and the districts it contains."""

    name: str
    districts: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StateRecord":
        name = str(data.get("name") or data.get("state") or "").strip()
        if not name:
            raise ValueError("state record without a name")
        raw_districts = data.get("districts") or ()
        districts = tuple(
            str(item).strip() for item in raw_districts if str(item).strip()
        )
        return cls(name=name, districts=districts)

    def to_mapping(self) -> Dict[str, Any]:
        return {"name": self.name, "districts": list(self.districts)}


@dataclass(frozen=True)
class GeographyCatalog:
    """Immutable lookup over the bundled state/district dataset.

    Loaded once when the service container is built and shared read-only by
    every request afterwards.
    """

    states: Tuple[StateRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "GeographyCatalog":
        return cls(states=tuple(StateRecord.from_mapping(item) for item in records))

    @classmethod
    def load(cls, path: Path) -> "GeographyCatalog":
        """Read a catalog file shaped like ``{"states": [...]}``.

        Raises:
            ValueError: When the file does not contain a ``states`` list.
        """

        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
        records = payload.get("states") if isinstance(payload, Mapping) else None
        if not isinstance(records, list):
            raise ValueError(f"Geography file {path} has no 'states' list")
        return cls.from_records(records)

    def state_names(self) -> List[str]:
        return [state.name for state in self.states]

    def find_state(self, name: str) -> Optional[StateRecord]:
        wanted = name.strip().lower()
        for state in self.states:
            if state.name.lower() == wanted:
                return state
        return None

    def to_mapping(self) -> Dict[str, Any]:
        return {"states": [state.to_mapping() for state in self.states]}


__all__ = ["GeographyCatalog", "StateRecord"]
