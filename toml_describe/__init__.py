"""toml_describe package

Decides, during a Cargo build's configuration phase, which capability flags
to enable from the compiler's version and release channel, the target
triple, and version requirements declared in the package manifest::

    [package.metadata.toml_describe.compiler_checks]
    let_else = { version = ">= 1.65", nightly_version = ">= 1.64" }

    [package.metadata.toml_describe.compiler_checks.'cfg(windows)']
    win_sockets = { version = ">= 1.70", cfg = "has_win_sockets" }

Public API (re-exported):
    - Evaluation: :func:`evaluate_manifest`, :func:`parse_manifest`,
      :func:`evaluate`, :func:`select`
    - Models: :class:`ToolchainDescriptor`, :class:`Condition`
    - Collaborators: :func:`probe_toolchain`, :func:`run_build_script`
    - Exceptions: :class:`CompilerCheckError` and its subclasses
"""

__version__ = "0.3.0"

from .core.errors import (
    CompilerCheckError,
    ConfigError,
    ManifestFormatError,
    PredicateError,
    ToolchainProbeError,
    UnknownTargetError,
    VersionSyntaxError,
)
from .models import Condition, ToolchainDescriptor
from .core.manifest import parse_manifest
from .core.engine import evaluate, evaluate_manifest, select
from .core.probe import probe_toolchain
from .core.emitter import run_build_script

__all__ = [
    "__version__",
    "CompilerCheckError",
    "ConfigError",
    "ManifestFormatError",
    "PredicateError",
    "ToolchainProbeError",
    "UnknownTargetError",
    "VersionSyntaxError",
    "Condition",
    "ToolchainDescriptor",
    "parse_manifest",
    "evaluate",
    "evaluate_manifest",
    "select",
    "probe_toolchain",
    "run_build_script",
]
