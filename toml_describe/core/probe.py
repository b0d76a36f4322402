"""Toolchain probe - ask the compiler for its version and channel.

``rustc --version --verbose`` prints something like::

    rustc 1.77.0-nightly (6ae4cfbbb 2024-01-17)
    binary: rustc
    commit-hash: 6ae4cfbbb080cf6e7a10e2a3d3e5fd4cbd8f5d38
    commit-date: 2024-01-17
    host: x86_64-unknown-linux-gnu
    release: 1.77.0-nightly
    LLVM version: 17.0.6

Only the ``release:`` line is used.
"""

import os
import subprocess
from typing import Callable, Mapping, Optional

from toml_describe.core.errors import ToolchainProbeError, UnknownTargetError
from toml_describe.core.logging import get_logger
from toml_describe.models.target import TargetInfo, lookup_target
from toml_describe.models.toolchain import ToolchainDescriptor

logger = get_logger("probe")

RELEASE_PREFIX = "release:"


def resolve_rustc_command(env: Optional[Mapping[str, str]] = None) -> str:
    """RUSTC, then CARGO_BUILD_RUSTC, then plain ``rustc``."""
    env = os.environ if env is None else env
    return env.get("RUSTC") or env.get("CARGO_BUILD_RUSTC") or "rustc"


def parse_release_line(output: str, command: Optional[str] = None) -> str:
    """Return the version token of the ``release:`` line."""
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line.startswith(RELEASE_PREFIX):
            continue
        token = line[len(RELEASE_PREFIX):].strip()
        if token:
            return token.split()[0]
        break

    raise ToolchainProbeError(
        "Compiler output has no 'release: <version>' line",
        command=command,
        output=output,
    )


def probe_toolchain(
    command: Optional[str] = None,
    *,
    marker: str = "nightly",
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> ToolchainDescriptor:
    """Run the compiler once and describe it."""
    command = command or resolve_rustc_command()
    args = [command, "--version", "--verbose"]

    try:
        proc = runner(args, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        raise ToolchainProbeError(
            f"'{' '.join(args)}' exited with status {e.returncode}",
            command=command,
            output=e.stderr or e.stdout or "",
            cause=e,
        ) from e
    except OSError as e:
        raise ToolchainProbeError(
            f"Could not run '{command}'",
            command=command,
            cause=e,
        ) from e

    release = parse_release_line(proc.stdout or "", command=command)
    toolchain = ToolchainDescriptor.from_release(release, marker=marker)
    logger.toolchain_detected(str(toolchain.version), toolchain.is_prerelease)
    return toolchain


def parse_target_cfg(triple: str, output: str) -> TargetInfo:
    """Build a TargetInfo from ``rustc --print cfg`` output.

    Only ``target_*="value"`` lines are read; ``target_family`` may repeat.
    """
    values: dict[str, str] = {}
    families: list[str] = []
    for raw_line in output.splitlines():
        key, sep, raw_value = raw_line.strip().partition("=")
        if not sep or not key.startswith("target_"):
            continue
        value = raw_value.strip().strip('"')
        if key == "target_family":
            families.append(value)
        else:
            values.setdefault(key, value)

    if "target_arch" not in values:
        raise UnknownTargetError(
            f"Compiler did not describe target '{triple}'",
            triple=triple,
        )

    width = values.get("target_pointer_width", "64")
    return TargetInfo(
        triple=triple,
        arch=values["target_arch"],
        vendor=values.get("target_vendor", "unknown"),
        os=values.get("target_os", "none"),
        env=values.get("target_env", ""),
        abi=values.get("target_abi", ""),
        families=tuple(families),
        endian=values.get("target_endian", "little"),
        pointer_width=int(width) if width.isdigit() else 64,
    )


def query_target(
    triple: str,
    command: Optional[str] = None,
    *,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> TargetInfo:
    """Ask the compiler for the cfg attributes of ``triple``."""
    command = command or resolve_rustc_command()
    args = [command, "--print", "cfg", "--target", triple]

    try:
        proc = runner(args, capture_output=True, text=True, check=True)
    except (subprocess.CalledProcessError, OSError) as e:
        raise UnknownTargetError(
            f"Unknown target triple '{triple}'",
            triple=triple,
            cause=e,
        ) from e

    info = parse_target_cfg(triple, proc.stdout or "")
    logger.info(
        "Resolved target from compiler",
        component="probe",
        target=triple,
        toolchain=command,
    )
    return info


def compiler_target_lookup(
    command: Optional[str] = None,
    *,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> Callable[[str], TargetInfo]:
    """A target lookup that asks the compiler about triples the builtin table lacks.

    Each triple is queried at most once per lookup.
    """
    resolved: dict[str, TargetInfo] = {}

    def fallback(triple: str) -> TargetInfo:
        if triple not in resolved:
            resolved[triple] = query_target(triple, command, runner=runner)
        return resolved[triple]

    def lookup(triple: str) -> TargetInfo:
        return lookup_target(triple, fallback=fallback)

    return lookup
