"""toml-describe CLI - run compiler checks from the command line.

Usage:
    toml-describe check              - Emit cargo directives (build script mode)
    toml-describe probe              - Show the detected toolchain
    toml-describe list               - Show reachable checks and their status
"""

import sys
from pathlib import Path
from typing import Optional

import click

from toml_describe import __version__
from toml_describe.config import Config
from toml_describe.core.emitter import flag_name, run_build_script, target_evaluator
from toml_describe.core.errors import CompilerCheckError, ConfigError, format_exception_chain
from toml_describe.core.logging import setup_logging
from toml_describe.core.manifest import load_manifest_text, parse_manifest
from toml_describe.core.probe import probe_toolchain
from toml_describe.models.toolchain import ToolchainDescriptor


def _fail(error: CompilerCheckError) -> None:
    click.echo(format_exception_chain(error), err=True)
    sys.exit(1)


def _load_config(
    manifest_dir: Optional[Path] = None,
    target: Optional[str] = None,
    rustc: Optional[str] = None,
    prefix: Optional[str] = None,
    section: Optional[str] = None,
) -> Config:
    config = Config()
    if manifest_dir is not None:
        config.manifest.manifest_dir = manifest_dir
    if target:
        config.build.target = target
    if rustc:
        config.probe.rustc = rustc
    if prefix is not None:
        config.emit.prefix = prefix
    if section:
        config.manifest.section = section

    issues = config.validate(require_build=False)
    if issues:
        raise ConfigError("Invalid configuration", details="; ".join(issues))

    setup_logging(
        level=config.log.level,
        format_type=config.log.format,
        console_enabled=config.log.console_enabled,
    )
    return config


def _toolchain(config: Config, release: Optional[str]) -> ToolchainDescriptor:
    if release:
        return ToolchainDescriptor.from_release(release, marker=config.probe.prerelease_marker)
    return probe_toolchain(config.probe.rustc, marker=config.probe.prerelease_marker)


manifest_dir_option = click.option(
    "--manifest-dir", type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding the manifest (default: $CARGO_MANIFEST_DIR)",
)
target_option = click.option("--target", help="Target triple (default: $TARGET)")
rustc_option = click.option("--rustc", help="Compiler binary (default: $RUSTC or rustc)")
release_option = click.option(
    "--release", help="Use this release token (e.g. 1.75.0-nightly) instead of probing",
)
section_option = click.option("--section", help="Dotted path of the checks table")


@click.group()
@click.version_option(version=__version__, prog_name="toml-describe")
def cli():
    """toml-describe - compiler capability checks for Cargo builds.

    Reads version requirements from the package manifest and enables a cfg
    flag for each capability the current compiler supports.
    """
    pass


@cli.command()
@manifest_dir_option
@target_option
@rustc_option
@release_option
@section_option
@click.option("--prefix", default=None, help="Prefix for emitted flag names")
def check(manifest_dir, target, rustc, release, section, prefix):
    """Emit cargo:rustc-cfg directives for the enabled capabilities."""
    try:
        config = _load_config(manifest_dir, target, rustc, prefix, section)
        toolchain = _toolchain(config, release)
        run_build_script(sys.stdout, config=config, toolchain=toolchain)
    except CompilerCheckError as e:
        _fail(e)


@cli.command()
@rustc_option
def probe(rustc):
    """Show the compiler version and release channel."""
    try:
        config = _load_config(rustc=rustc)
        toolchain = probe_toolchain(config.probe.rustc, marker=config.probe.prerelease_marker)
    except CompilerCheckError as e:
        _fail(e)
        return

    click.echo(f"Compiler: {config.probe.rustc}")
    click.echo(f"Version:  {toolchain.version}")
    click.echo(f"Channel:  {toolchain.channel}")


@cli.command(name="list")
@manifest_dir_option
@target_option
@rustc_option
@release_option
@section_option
def list_checks(manifest_dir, target, rustc, release, section):
    """List the checks reachable for the target and whether each is enabled."""
    try:
        config = _load_config(manifest_dir, target, rustc, section=section)
        toolchain = _toolchain(config, release)
        text = load_manifest_text(config.manifest.manifest_dir, config.manifest.file_name)
        pairs = parse_manifest(
            text,
            config.build.target,
            section=config.manifest.section_path,
            evaluator=target_evaluator(config),
        )
    except CompilerCheckError as e:
        _fail(e)
        return

    click.echo(f"Toolchain: {toolchain}")
    if not pairs:
        click.echo("No checks apply to this target.")
        return

    for name, condition in pairs:
        mark = click.style("on ", fg="green") if condition.satisfies(toolchain) else click.style("off", fg="red")
        stable = condition.version.text if condition.version else "-"
        nightly = condition.nightly_version.text if condition.nightly_version else "-"
        click.echo(
            f"  [{mark}] {name:<24} flag={flag_name(name, condition, config.emit.prefix)} "
            f"version={stable} nightly={nightly}"
        )
