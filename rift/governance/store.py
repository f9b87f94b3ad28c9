"""
GovernanceStore - the per-stage key/value configuration every RIFT stage
reads from.

Entries are kept in insertion order and are never removed. Looking up a
(section, key) pair returns the most recently added value, so re-adding a
key overrides it without losing the original ordering of the section.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .defaults import DEFAULT_STAGE_RECORDS, GOVERNANCE_VERSION, STAGE_IDS, default_sections
from .errors import (
    create_invalid_value_error, create_missing_key_error, create_unknown_stage_error
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "yes", "on", "1", "enabled"}
_FALSE_VALUES = {"false", "no", "off", "0", "disabled"}

SectionInput = Union[Mapping[str, str], List[Tuple[str, str]]]


@dataclass(frozen=True)
class GovernanceEntry:
    """One configured value. Immutable once loaded."""
    section: str
    key: str
    value: str


class GovernanceStore:
    """
    Ordered (section, key) -> value store for a single stage.

    Constructing a store with just a stage id loads that stage's built-in
    record. Use `from_mapping` to build a store from configuration that was
    materialised elsewhere.
    """

    def __init__(self, stage_id: int, load_defaults: bool = True):
        if stage_id not in STAGE_IDS:
            raise create_unknown_stage_error(stage_id, STAGE_IDS)

        record = DEFAULT_STAGE_RECORDS[stage_id]
        self.stage_id = stage_id
        self.stage_name: str = record["stage_name"]
        self.sp_alignment: str = record["sp_alignment"]
        self.governance_version = GOVERNANCE_VERSION
        self._entries: List[GovernanceEntry] = []

        if load_defaults:
            for section, pairs in default_sections(stage_id).items():
                for key, value in pairs:
                    self.add(section, key, value)
            logger.debug(
                "Loaded default governance for stage %d (%s, %s): %d entries",
                stage_id, self.stage_name, self.sp_alignment, len(self._entries)
            )

    @classmethod
    def from_mapping(
        cls,
        stage_id: int,
        sections: Mapping[str, SectionInput],
        stage_name: Optional[str] = None,
        sp_alignment: Optional[str] = None,
        governance_version: Optional[str] = None,
    ) -> "GovernanceStore":
        """
        Build a store from already-loaded configuration.

        Args:
            stage_id: Stage the configuration belongs to (0-3)
            sections: Section name -> mapping or list of (key, value) pairs
            stage_name: Overrides the built-in stage name
            sp_alignment: Overrides the built-in SP alignment label
            governance_version: Overrides the built-in governance version

        Raises:
            ConfigurationError: If stage_id is not a known stage
        """
        store = cls(stage_id, load_defaults=False)
        if stage_name is not None:
            store.stage_name = stage_name
        if sp_alignment is not None:
            store.sp_alignment = sp_alignment
        if governance_version is not None:
            store.governance_version = governance_version

        for section, pairs in sections.items():
            items = pairs.items() if isinstance(pairs, Mapping) else pairs
            for key, value in items:
                store.add(section, key, str(value))

        return store

    # Mutation

    def add(self, section: str, key: str, value: str):
        """Append an entry. A later entry for the same (section, key) wins."""
        self._entries.append(GovernanceEntry(section, key, value))

    # Lookup

    def get(self, section: str, key: str) -> Optional[str]:
        """Return the most recently added value for (section, key), or None."""
        for entry in reversed(self._entries):
            if entry.section == section and entry.key == key:
                return entry.value
        return None

    def require(self, section: str, key: str) -> str:
        """Like get(), but a missing key is a ConfigurationError."""
        value = self.get(section, key)
        if value is None:
            raise create_missing_key_error(self.stage_id, section, key)
        return value

    def get_int(self, section: str, key: str, default: Optional[int] = None) -> Optional[int]:
        """Read an integer value; absent keys return `default`."""
        value = self.get(section, key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            raise create_invalid_value_error(self.stage_id, section, key, value, "integer")

    def get_bool(self, section: str, key: str, default: Optional[bool] = None) -> Optional[bool]:
        """
        Read a boolean value; absent keys return `default`.

        Accepts true/false, yes/no, on/off, 1/0 and enabled/disabled,
        case-insensitively.
        """
        value = self.get(section, key)
        if value is None:
            return default

        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise create_invalid_value_error(self.stage_id, section, key, value, "boolean")

    def section(self, section: str) -> Dict[str, str]:
        """Last-wins view of one section, keys in first-insertion order."""
        result: Dict[str, str] = {}
        for entry in self._entries:
            if entry.section == section:
                result[entry.key] = entry.value
        return result

    def sections(self) -> List[str]:
        """Section names in the order they were first added."""
        names: List[str] = []
        for entry in self._entries:
            if entry.section not in names:
                names.append(entry.section)
        return names

    def entries(self) -> Iterator[GovernanceEntry]:
        return iter(self._entries)

    def stage_config(self):
        """Materialise the read-only StageConfig record for this store."""
        from .config import StageConfig

        return StageConfig(
            stage_id=self.stage_id,
            stage_name=self.stage_name,
            sp_alignment=self.sp_alignment,
            governance_version=self.governance_version,
            sections={name: self.section(name) for name in self.sections()},
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"GovernanceStore(stage_id={self.stage_id}, stage_name={self.stage_name!r}, "
                f"entries={len(self._entries)})")


def load_governance(overrides: Optional[Mapping[int, GovernanceStore]] = None) -> Dict[int, GovernanceStore]:
    """
    Load a store for every stage.

    Stages present in `overrides` use the supplied store; the rest use
    their built-in record.
    """
    overrides = overrides or {}
    unknown = set(overrides) - set(STAGE_IDS)
    if unknown:
        raise create_unknown_stage_error(min(unknown), STAGE_IDS)

    stores: Dict[int, GovernanceStore] = {}
    for stage_id in STAGE_IDS:
        if stage_id in overrides:
            stores[stage_id] = overrides[stage_id]
        else:
            stores[stage_id] = GovernanceStore(stage_id)

    return stores
