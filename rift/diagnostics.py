"""
Shared diagnostic types for the RIFT pipeline.

Every stage reports problems through a Diagnostic: fatal problems are raised
as RiftError subclasses, recoverable ones are collected as RiftWarning
records on the stage object that produced them.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the single-line source handed to the tokenizer.

    `column` is the ordinal position of a token in the emitted stream,
    not a character offset.
    """
    source_name: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.source_name}:{self.line}:{self.column}"


@dataclass
class Diagnostic:
    """A single error, warning or note produced by a pipeline stage."""
    message: str
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    location: Optional[SourceLocation] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        prefix = self.severity.upper()
        if self.code:
            prefix += f"[{self.code}]"
        result = f"{prefix}: {self.message}\n"

        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class RiftError(Exception):
    """
    Base exception for fatal pipeline errors.

    Carries a Diagnostic with the error code and location.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            location=location,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class RiftWarning:
    """A recoverable problem recorded by a stage; does not stop the pipeline."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            severity="warning",
            code=code,
            location=location,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.diagnostic.code!r}, {self.diagnostic.message!r})"
