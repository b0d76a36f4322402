"""Core package - manifest parsing, enablement and emission.

Only the error types are re-exported here; the pipeline modules import the
models package, which itself depends on these errors.
"""

from .errors import (
    CompilerCheckError,
    ConfigError,
    ManifestFormatError,
    PredicateError,
    ToolchainProbeError,
    UnknownTargetError,
    VersionSyntaxError,
)

__all__ = [
    "CompilerCheckError",
    "ConfigError",
    "ManifestFormatError",
    "PredicateError",
    "ToolchainProbeError",
    "UnknownTargetError",
    "VersionSyntaxError",
]
