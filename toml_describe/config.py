"""Centralized configuration for toml-describe.

This module provides typed configuration loaded from environment variables
and .env files. Cargo exports most of what a build script needs (TARGET,
CARGO_MANIFEST_DIR, RUSTC); the TOML_DESCRIBE_* variables tune the rest.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

DEFAULT_SECTION = "package.metadata.toml_describe.compiler_checks"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ("1", "true", "yes", "on")


@dataclass
class ProbeConfig:
    """Toolchain probe configuration."""
    rustc: str = "rustc"
    prerelease_marker: str = "nightly"
    query_targets: bool = True

    def __post_init__(self):
        self.rustc = os.getenv("RUSTC") or os.getenv("CARGO_BUILD_RUSTC") or self.rustc
        self.prerelease_marker = os.getenv("TOML_DESCRIBE_PRERELEASE_MARKER", self.prerelease_marker)
        self.query_targets = _env_flag("TOML_DESCRIBE_QUERY_TARGETS", self.query_targets)


@dataclass
class ManifestConfig:
    """Where the manifest lives and which table holds the checks."""
    manifest_dir: Optional[Path] = None
    file_name: str = "Cargo.toml"
    section: str = DEFAULT_SECTION

    def __post_init__(self):
        base = os.getenv("CARGO_MANIFEST_DIR")
        if base:
            self.manifest_dir = Path(base)
        self.file_name = os.getenv("TOML_DESCRIBE_MANIFEST", self.file_name)
        self.section = os.getenv("TOML_DESCRIBE_SECTION", self.section)

    @property
    def section_path(self) -> list[str]:
        return [part for part in self.section.split(".") if part]

    @property
    def manifest_path(self) -> Optional[Path]:
        if self.manifest_dir is None:
            return None
        return self.manifest_dir / self.file_name


@dataclass
class BuildConfig:
    """Build target configuration."""
    target: Optional[str] = None

    def __post_init__(self):
        self.target = os.getenv("TARGET") or self.target


@dataclass
class EmitConfig:
    """Directive emission configuration."""
    prefix: str = ""
    rerun_if_changed: bool = True

    def __post_init__(self):
        self.prefix = os.getenv("TOML_DESCRIBE_PREFIX", self.prefix)
        self.rerun_if_changed = _env_flag("TOML_DESCRIBE_RERUN", self.rerun_if_changed)


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    format: str = "text"  # "json" or "text"
    console_enabled: bool = True

    def __post_init__(self):
        self.level = os.getenv("TOML_DESCRIBE_LOG_LEVEL", self.level).upper()
        self.format = os.getenv("TOML_DESCRIBE_LOG_FORMAT", self.format).lower()
        self.console_enabled = _env_flag("TOML_DESCRIBE_LOG_CONSOLE", self.console_enabled)


@dataclass
class Config:
    """Main configuration container."""
    probe: ProbeConfig = field(default_factory=ProbeConfig)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    build: BuildConfig = field(default_factory=BuildConfig)
    emit: EmitConfig = field(default_factory=EmitConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self, require_build: bool = True) -> list[str]:
        """Validate configuration and return list of issues.

        With ``require_build=False`` the Cargo-provided TARGET and
        CARGO_MANIFEST_DIR are not required.
        """
        issues = []

        if require_build and not self.build.target:
            issues.append("TARGET is required but not set")

        if require_build and self.manifest.manifest_dir is None:
            issues.append("CARGO_MANIFEST_DIR is required but not set")

        if not self.manifest.section_path:
            issues.append("TOML_DESCRIBE_SECTION must name a table")

        if not self.probe.prerelease_marker:
            issues.append("TOML_DESCRIBE_PRERELEASE_MARKER must not be empty")

        if self.log.format not in ("json", "text"):
            issues.append("TOML_DESCRIBE_LOG_FORMAT must be 'json' or 'text'")

        if self.log.level not in LOG_LEVELS:
            issues.append(f"TOML_DESCRIBE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return issues

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
