"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

# Add project root to Python path so 'toml_describe' is findable
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from toml_describe.config import reset_config
from toml_describe.core.logging import reset_logging
from toml_describe.models.toolchain import ToolchainDescriptor

TEST_CASES = Path(__file__).parent / "test_cases"

LINUX = "x86_64-unknown-linux-gnu"
WINDOWS = "x86_64-pc-windows-msvc"

ENV_VARS = (
    "TARGET",
    "CARGO_MANIFEST_DIR",
    "RUSTC",
    "CARGO_BUILD_RUSTC",
    "TOML_DESCRIBE_PRERELEASE_MARKER",
    "TOML_DESCRIBE_QUERY_TARGETS",
    "TOML_DESCRIBE_MANIFEST",
    "TOML_DESCRIBE_SECTION",
    "TOML_DESCRIBE_PREFIX",
    "TOML_DESCRIBE_RERUN",
    "TOML_DESCRIBE_LOG_LEVEL",
    "TOML_DESCRIBE_LOG_FORMAT",
    "TOML_DESCRIBE_LOG_CONSOLE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without build-script environment leaking in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
    reset_logging()


@pytest.fixture
def stable():
    """Factory for stable toolchains."""
    def make(version: str = "1.75.0") -> ToolchainDescriptor:
        return ToolchainDescriptor.from_release(version)
    return make


@pytest.fixture
def nightly():
    """Factory for nightly toolchains."""
    def make(version: str = "1.75.0") -> ToolchainDescriptor:
        return ToolchainDescriptor.from_release(f"{version}-nightly")
    return make


@pytest.fixture
def manifest():
    """Wrap check entries in a Cargo.toml with the default section."""
    def make(body: str) -> str:
        return (
            '[package]\nname = "demo"\nversion = "0.1.0"\n\n'
            "[package.metadata.toml_describe.compiler_checks]\n"
            f"{body}"
        )
    return make


@pytest.fixture
def crate_dir(tmp_path: Path):
    """Write a Cargo.toml into a temporary crate directory."""
    def make(text: str) -> Path:
        (tmp_path / "Cargo.toml").write_text(text)
        return tmp_path
    return make
