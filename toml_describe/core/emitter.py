"""Directive emission and the build-script entrypoint.

Cargo reads ``cargo:`` lines from a build script's stdout. Every enabled
capability becomes one ``cargo:rustc-cfg=<flag>`` line.
"""

import sys
from typing import Iterable, Optional, TextIO

from toml_describe.config import Config, get_config
from toml_describe.core.engine import select
from toml_describe.core.errors import ConfigError
from toml_describe.core.logging import get_logger
from toml_describe.core.manifest import Pair, load_manifest_text, parse_manifest
from toml_describe.core.probe import compiler_target_lookup, probe_toolchain
from toml_describe.models.condition import Condition
from toml_describe.models.toolchain import ToolchainDescriptor
from toml_describe.predicates.evaluator import PredicateEvaluator

logger = get_logger("emitter")


def target_evaluator(config: Config) -> PredicateEvaluator:
    """Evaluator whose target lookup falls back to the compiler when enabled."""
    if not config.probe.query_targets:
        return PredicateEvaluator()
    return PredicateEvaluator(target_lookup=compiler_target_lookup(config.probe.rustc))


def flag_name(name: str, condition: Condition, prefix: str = "") -> str:
    """The cfg flag for a capability: its ``cfg`` override, else prefix + name."""
    return condition.cfg or f"{prefix}{name}"


class DirectiveEmitter:
    """Renders enabled capabilities as cargo directives."""

    def __init__(
        self,
        writer: TextIO,
        prefix: str = "",
        rerun_if_changed: bool = True,
        manifest_name: str = "Cargo.toml",
    ):
        self.writer = writer
        self.prefix = prefix
        self.rerun_if_changed = rerun_if_changed
        self.manifest_name = manifest_name

    def render(self, selected: Iterable[Pair]) -> list[str]:
        lines = []
        if self.rerun_if_changed:
            lines.append(f"cargo:rerun-if-changed={self.manifest_name}")
        for name, condition in selected:
            lines.append(f"cargo:rustc-cfg={flag_name(name, condition, self.prefix)}")
        return lines

    def emit(self, selected: Iterable[Pair]) -> list[str]:
        """Write all directives in one go and return them."""
        lines = self.render(selected)
        self.writer.write("".join(f"{line}\n" for line in lines))
        self.writer.flush()
        return lines


def run_build_script(
    writer: Optional[TextIO] = None,
    *,
    config: Optional[Config] = None,
    toolchain: Optional[ToolchainDescriptor] = None,
    target: Optional[str] = None,
    manifest_text: Optional[str] = None,
) -> list[str]:
    """Probe, parse, evaluate and emit, as a build script would.

    Nothing is written unless every step succeeds.
    """
    config = config or get_config()
    writer = writer or sys.stdout

    target = target or config.build.target
    if not target:
        raise ConfigError("Target triple is not set", config_key="TARGET")

    if toolchain is None:
        toolchain = probe_toolchain(config.probe.rustc, marker=config.probe.prerelease_marker)

    if manifest_text is None:
        manifest_text = load_manifest_text(config.manifest.manifest_dir, config.manifest.file_name)

    pairs = parse_manifest(
        manifest_text,
        target,
        section=config.manifest.section_path,
        evaluator=target_evaluator(config),
    )
    selected = select(pairs, toolchain)

    emitter = DirectiveEmitter(
        writer,
        prefix=config.emit.prefix,
        rerun_if_changed=config.emit.rerun_if_changed,
        manifest_name=config.manifest.file_name,
    )
    lines = emitter.emit(selected)
    logger.info(
        f"Enabled {len(selected)} of {len(pairs)} checks",
        component="emitter",
        target=target,
        toolchain=str(toolchain),
    )
    return lines
