"""Custom exceptions for toml-describe.

Every failure in a configuration run is fatal: the build must not proceed
with a partial set of enabled capabilities. The exceptions carry enough
context to point the user at the capability or predicate at fault.
"""

from typing import Optional


class CompilerCheckError(Exception):
    """Base exception for all toml-describe errors.

    Provides:
    - User-friendly message
    - Technical details for debugging
    - Suggested fixes when applicable
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.details = details
        self.suggestion = suggestion
        self.cause = cause
        super().__init__(message)

    def format_user_friendly(self) -> str:
        """Format error for display to user."""
        parts = [f"error: {self.message}"]

        if self.details:
            parts.append(f"   Details: {self.details}")

        if self.suggestion:
            parts.append(f"   Try: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self.format_user_friendly()


class ConfigError(CompilerCheckError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and config_key:
            suggestion = f"Set the {config_key} environment variable or add it to .env"
        super().__init__(message, suggestion=suggestion, **kwargs)
        self.config_key = config_key


class ManifestFormatError(CompilerCheckError):
    """The manifest is not valid TOML or lacks the compiler checks section."""

    def __init__(
        self,
        message: str,
        entry: Optional[str] = None,
        section: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details:
            parts = []
            if entry:
                parts.append(f"Entry: {entry}")
            if section:
                parts.append(f"Section: {section}")
            if parts:
                details = ", ".join(parts)

        super().__init__(message, details=details, **kwargs)
        self.entry = entry
        self.section = section


class PredicateError(CompilerCheckError):
    """A platform-scoping key is not a valid platform predicate."""

    def __init__(
        self,
        message: str,
        predicate: Optional[str] = None,
        position: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details and predicate is not None:
            details = f"Predicate: {predicate}"
            if position is not None:
                details += f", at offset {position}"

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = 'Use target predicates such as cfg(target_os = "linux")'

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.predicate = predicate
        self.position = position


class UnknownTargetError(CompilerCheckError):
    """Neither the builtin target table nor the compiler knows the triple."""

    def __init__(self, message: str, triple: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", None)
        if not details and triple is not None:
            details = f"Target: {triple}"
        super().__init__(message, details=details, **kwargs)
        self.triple = triple


class VersionSyntaxError(CompilerCheckError):
    """A declared version range is not a valid range expression."""

    def __init__(
        self,
        message: str,
        capability: Optional[str] = None,
        requirement: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details:
            parts = []
            if capability:
                parts.append(f"Capability: {capability}")
            if requirement is not None:
                parts.append(f"Requirement: {requirement!r}")
            if parts:
                details = ", ".join(parts)

        super().__init__(message, details=details, **kwargs)
        self.capability = capability
        self.requirement = requirement


class ToolchainProbeError(CompilerCheckError):
    """The compiler could not be run or its version output was not understood."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        output: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details:
            parts = []
            if command:
                parts.append(f"Command: {command}")
            if output is not None:
                parts.append(f"Output: {output.strip()[:80]!r}")
            if parts:
                details = ", ".join(parts)

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and command:
            suggestion = "Point RUSTC at a working compiler binary"

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.command = command
        self.output = output


def format_exception_chain(error: Exception, max_depth: int = 5) -> str:
    """Format an exception chain for display.

    Handles nested exceptions and provides clean output.
    """
    lines = []
    current = error
    depth = 0

    while current and depth < max_depth:
        if isinstance(current, CompilerCheckError):
            lines.append(current.format_user_friendly())
        else:
            lines.append(f"error: {type(current).__name__}: {current}")

        current = getattr(current, "__cause__", None) or getattr(current, "cause", None)
        depth += 1

        if current:
            lines.append("   Caused by:")

    return "\n".join(lines)
