"""Tests for the toolchain probe."""

import subprocess

import pytest
from semantic_version import Version

from toml_describe.core.errors import ToolchainProbeError, UnknownTargetError
from toml_describe.core.probe import (
    compiler_target_lookup,
    parse_release_line,
    parse_target_cfg,
    probe_toolchain,
    query_target,
    resolve_rustc_command,
)
from toml_describe.predicates import PredicateEvaluator

NIGHTLY_OUTPUT = """rustc 1.77.0-nightly (6ae4cfbbb 2024-01-17)
binary: rustc
commit-hash: 6ae4cfbbb080cf6e7a10e2a3d3e5fd4cbd8f5d38
commit-date: 2024-01-17
host: x86_64-unknown-linux-gnu
release: 1.77.0-nightly
LLVM version: 17.0.6
"""

STABLE_OUTPUT = """rustc 1.75.0 (82e1608df 2023-12-21)
binary: rustc
commit-hash: 82e1608dfa6e0b5569232559e3d385fea5a93112
commit-date: 2023-12-21
host: x86_64-unknown-linux-gnu
release: 1.75.0
LLVM version: 17.0.6
"""


def fake_runner(stdout="", returncode=0, exc=None):
    calls = []

    def run(args, **kwargs):
        calls.append(args)
        if exc is not None:
            raise exc
        if returncode:
            raise subprocess.CalledProcessError(returncode, args, output=stdout, stderr="boom")
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr="")

    run.calls = calls
    return run


class TestParseReleaseLine:
    """Scraping the version token."""

    def test_nightly(self):
        assert parse_release_line(NIGHTLY_OUTPUT) == "1.77.0-nightly"

    def test_stable(self):
        assert parse_release_line(STABLE_OUTPUT) == "1.75.0"

    def test_line_position_does_not_matter(self):
        assert parse_release_line("release: 1.70.0\nbinary: rustc\n") == "1.70.0"

    @pytest.mark.parametrize("output", ["", "rustc 1.75.0\n", "release:\n"])
    def test_missing(self, output):
        with pytest.raises(ToolchainProbeError):
            parse_release_line(output, command="rustc")


class TestProbeToolchain:
    """Running the compiler."""

    def test_stable(self):
        runner = fake_runner(STABLE_OUTPUT)
        tc = probe_toolchain("rustc", runner=runner)
        assert tc.version == Version("1.75.0")
        assert not tc.is_prerelease
        assert runner.calls == [["rustc", "--version", "--verbose"]]

    def test_nightly(self):
        tc = probe_toolchain("rustc", runner=fake_runner(NIGHTLY_OUTPUT))
        assert tc.version == Version("1.77.0")
        assert tc.is_prerelease

    def test_missing_binary(self):
        runner = fake_runner(exc=FileNotFoundError("no such file"))
        with pytest.raises(ToolchainProbeError) as exc:
            probe_toolchain("/nope/rustc", runner=runner)
        assert exc.value.command == "/nope/rustc"
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_failing_binary(self):
        with pytest.raises(ToolchainProbeError) as exc:
            probe_toolchain("rustc", runner=fake_runner(returncode=1))
        assert "status 1" in exc.value.message

    def test_garbage_version(self):
        with pytest.raises(ToolchainProbeError):
            probe_toolchain("rustc", runner=fake_runner("release: one.two\n"))

    def test_uses_environment(self, monkeypatch):
        monkeypatch.setenv("RUSTC", "/opt/rust/bin/rustc")
        runner = fake_runner(STABLE_OUTPUT)
        probe_toolchain(runner=runner)
        assert runner.calls[0][0] == "/opt/rust/bin/rustc"


class TestResolveCommand:
    """Compiler command resolution order."""

    def test_rustc_wins(self):
        env = {"RUSTC": "a", "CARGO_BUILD_RUSTC": "b"}
        assert resolve_rustc_command(env) == "a"

    def test_cargo_build_rustc(self):
        assert resolve_rustc_command({"CARGO_BUILD_RUSTC": "b"}) == "b"

    def test_default(self):
        assert resolve_rustc_command({}) == "rustc"


LINUX_CFG = """debug_assertions
panic="unwind"
target_abi=""
target_arch="riscv64"
target_endian="little"
target_env="gnu"
target_family="unix"
target_has_atomic="64"
target_os="linux"
target_pointer_width="64"
target_vendor="unknown"
unix
"""


class TestTargetQuery:
    """Asking the compiler about triples the builtin table lacks."""

    def test_parse_cfg(self):
        info = parse_target_cfg("riscv64-custom-linux-gnu", LINUX_CFG)
        assert info.triple == "riscv64-custom-linux-gnu"
        assert info.arch == "riscv64"
        assert info.os == "linux"
        assert info.env == "gnu"
        assert info.abi == ""
        assert info.families == ("unix",)
        assert info.pointer_width == 64

    def test_parse_cfg_several_families(self):
        output = 'target_arch="wasm32"\ntarget_family="unix"\ntarget_family="wasm"\ntarget_pointer_width="32"\n'
        info = parse_target_cfg("wasm32-custom-emscripten", output)
        assert info.families == ("unix", "wasm")
        assert info.pointer_width == 32

    def test_parse_cfg_without_arch(self):
        with pytest.raises(UnknownTargetError) as exc:
            parse_target_cfg("mystery", "debug_assertions\n")
        assert exc.value.triple == "mystery"

    def test_query(self):
        runner = fake_runner(LINUX_CFG)
        info = query_target("riscv64-custom-linux-gnu", "rustc", runner=runner)
        assert info.arch == "riscv64"
        assert runner.calls == [["rustc", "--print", "cfg", "--target", "riscv64-custom-linux-gnu"]]

    def test_query_rejected_triple(self):
        with pytest.raises(UnknownTargetError) as exc:
            query_target("x86_65-unknown-freax-gna", "rustc", runner=fake_runner(returncode=1))
        assert exc.value.triple == "x86_65-unknown-freax-gna"
        assert isinstance(exc.value.__cause__, subprocess.CalledProcessError)

    def test_query_missing_compiler(self):
        runner = fake_runner(exc=FileNotFoundError("no such file"))
        with pytest.raises(UnknownTargetError):
            query_target("riscv64-custom-linux-gnu", "/nope/rustc", runner=runner)

    def test_lookup_prefers_builtin_table(self):
        runner = fake_runner(LINUX_CFG)
        lookup = compiler_target_lookup("rustc", runner=runner)
        assert lookup("x86_64-pc-windows-msvc").os == "windows"
        assert runner.calls == []

    def test_lookup_queries_once(self):
        runner = fake_runner(LINUX_CFG)
        lookup = compiler_target_lookup("rustc", runner=runner)
        first = lookup("riscv64-custom-linux-gnu")
        assert lookup("riscv64-custom-linux-gnu") is first
        assert len(runner.calls) == 1

    def test_evaluator_with_compiler_lookup(self):
        evaluator = PredicateEvaluator(target_lookup=compiler_target_lookup("rustc", runner=fake_runner(LINUX_CFG)))
        assert evaluator.evaluate('cfg(all(unix, target_arch = "riscv64"))', "riscv64-custom-linux-gnu")
