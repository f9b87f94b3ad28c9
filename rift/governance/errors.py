"""
Error handling for RIFT governance (per-stage configuration).

Configuration problems are fail-fast: they abort construction of the
affected stage and are never retried.

Author: xwest
"""

from typing import Iterable, Optional

from ..diagnostics import RiftError


class ConfigurationError(RiftError):
    """
    Raised when a stage id is unknown, a required key is absent,
    or a value cannot be read as the requested type.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        stage_id: Optional[int] = None,
        section: Optional[str] = None,
        key: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[list] = None
    ):
        super().__init__(message, code=code, help_text=help_text, suggestions=suggestions)
        self.stage_id = stage_id
        self.section = section
        self.key = key


GOVERNANCE_ERROR_CODES = {
    "G001": "Unknown stage id",
    "G002": "Required governance key missing",
    "G003": "Governance value has the wrong type",
    "G004": "Unsupported output format",
}


def create_unknown_stage_error(stage_id: int, known: Iterable[int]) -> ConfigurationError:
    """Create an error for a stage id with no governance record."""
    known_ids = ", ".join(str(i) for i in sorted(known))
    return ConfigurationError(
        message=f"Unknown stage id: {stage_id}",
        code="G001",
        stage_id=stage_id,
        help_text=f"Stage ids must be one of: {known_ids}.",
    )


def create_missing_key_error(stage_id: int, section: str, key: str) -> ConfigurationError:
    """Create an error for a required (section, key) that is not configured."""
    return ConfigurationError(
        message=f"Missing governance key {section}.{key} for stage {stage_id}",
        code="G002",
        stage_id=stage_id,
        section=section,
        key=key,
        help_text=f"Add '{key}' to the [{section}] section of the stage {stage_id} configuration.",
    )


def create_invalid_value_error(stage_id: int, section: str, key: str,
                               value: str, expected: str) -> ConfigurationError:
    """Create an error for a value that cannot be read as `expected`."""
    return ConfigurationError(
        message=f"Invalid {expected} value for {section}.{key}: {value!r}",
        code="G003",
        stage_id=stage_id,
        section=section,
        key=key,
        help_text=f"The value of {section}.{key} must be a valid {expected}.",
    )


def create_unsupported_format_error(fmt: str, supported: Iterable[str]) -> ConfigurationError:
    """Create an error for an output format the renderer does not know."""
    supported = sorted(supported)
    return ConfigurationError(
        message=f"Unsupported output format: {fmt!r}",
        code="G004",
        stage_id=3,
        section="OUTPUT_FORMATS",
        key="primary_format",
        suggestions=supported,
    )
