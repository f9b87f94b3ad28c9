"""
RIFT Governance Package

Per-stage configuration consumed read-only by the pipeline: the ordered
GovernanceStore, the built-in stage records and typed settings views.

Author: xwest
"""

from .store import GovernanceStore, GovernanceEntry, load_governance
from .config import (
    StageConfig, TokenizerSettings, ParserSettings,
    CoordinatorSettings, OutputSettings
)
from .defaults import DEFAULT_STAGE_RECORDS, GOVERNANCE_VERSION, STAGE_IDS
from .errors import ConfigurationError, GOVERNANCE_ERROR_CODES

__all__ = [
    "GovernanceStore",
    "GovernanceEntry",
    "load_governance",
    "StageConfig",
    "TokenizerSettings",
    "ParserSettings",
    "CoordinatorSettings",
    "OutputSettings",
    "DEFAULT_STAGE_RECORDS",
    "GOVERNANCE_VERSION",
    "STAGE_IDS",
    "ConfigurationError",
    "GOVERNANCE_ERROR_CODES",
]
