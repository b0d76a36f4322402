"""Tests for the platform predicate grammar and evaluator."""

import pytest

from toml_describe.core.errors import PredicateError, UnknownTargetError
from toml_describe.models.target import BUILTIN_TARGETS, TargetInfo, get_builtin_target, lookup_target
from toml_describe.predicates import PredicateEvaluator, evaluate, parse_predicate
from toml_describe.predicates.expression import All, Any, Not, TargetPredicate

LINUX = "x86_64-unknown-linux-gnu"
MUSL = "x86_64-unknown-linux-musl"
WINDOWS = "x86_64-pc-windows-msvc"
MACOS = "aarch64-apple-darwin"
WASM = "wasm32-unknown-unknown"


class TestParse:
    """Shape of parsed expressions."""

    def test_target_os(self):
        assert parse_predicate('cfg(target_os = "linux")') == TargetPredicate("os", "linux")

    def test_without_cfg_wrapper(self):
        assert parse_predicate('target_arch="x86_64"') == TargetPredicate("arch", "x86_64")

    def test_family_shorthand(self):
        assert parse_predicate("cfg(unix)") == TargetPredicate("family", "unix")

    def test_nested(self):
        expr = parse_predicate('cfg(all(unix, not(target_env = "musl")))')
        assert expr == All((
            TargetPredicate("family", "unix"),
            Not(TargetPredicate("env", "musl")),
        ))

    def test_trailing_comma(self):
        expr = parse_predicate("cfg(any(unix, windows,))")
        assert expr == Any((TargetPredicate("family", "unix"), TargetPredicate("family", "windows")))

    def test_str_round_trip(self):
        expr = parse_predicate('cfg(any(windows, target_os = "macos"))')
        assert parse_predicate(str(expr)) == expr

    @pytest.mark.parametrize("text", [
        "",
        "cfg()",
        "cfg(target_os = linux)",
        'cfg(target_os = "linux"',
        'cfg(target_os = "linux)',
        'cfg(target_os = "linux")) ',
        'cfg(feature = "serde")',
        "cfg(debug_assertions)",
        "cfg(not(unix, windows))",
        "cfg(not())",
        'cfg(target_endian = "middle")',
        'cfg(target_pointer_width = "wide")',
        "cfg(any(unix windows))",
        "cfg(unix) extra",
        "cfg(unix; windows)",
        "any",
    ])
    def test_malformed(self, text):
        with pytest.raises(PredicateError) as exc:
            parse_predicate(text)
        assert exc.value.predicate == text

    def test_error_position(self):
        with pytest.raises(PredicateError) as exc:
            parse_predicate('cfg(feature = "serde")')
        assert exc.value.position == 4
        assert "feature" in exc.value.message


class TestEvaluate:
    """Evaluation against builtin targets."""

    @pytest.mark.parametrize("predicate,target,expected", [
        ('cfg(target_os = "linux")', LINUX, True),
        ('cfg(target_os = "linux")', WINDOWS, False),
        ("cfg(windows)", WINDOWS, True),
        ("cfg(unix)", MACOS, True),
        ('cfg(any(windows, target_os = "macos"))', MACOS, True),
        ('cfg(any(windows, target_os = "macos"))', LINUX, False),
        ('cfg(all(unix, target_pointer_width = "64", not(target_env = "musl")))', LINUX, True),
        ('cfg(all(unix, target_pointer_width = "64", not(target_env = "musl")))', MUSL, False),
        ('cfg(target_family = "wasm")', WASM, True),
        ("cfg(unix)", WASM, False),
        ('cfg(target_vendor = "apple")', MACOS, True),
        ('cfg(target_endian = "little")', LINUX, True),
        ("cfg(any())", LINUX, False),
        ("cfg(all())", LINUX, True),
    ])
    def test_builtin_targets(self, predicate, target, expected):
        assert evaluate(predicate, target) is expected

    def test_unknown_target(self):
        with pytest.raises(UnknownTargetError) as exc:
            evaluate('cfg(target_os = "linux")', "x86_65-unknown-freax-gna")
        assert exc.value.triple == "x86_65-unknown-freax-gna"
        assert "x86_65-unknown-freax-gna" in str(exc.value)

    def test_malformed_reported_before_unknown_target(self):
        with pytest.raises(PredicateError):
            evaluate("cfg(feature)", "x86_65-unknown-freax-gna")

    def test_custom_target_lookup(self):
        custom = TargetInfo(triple="my-board", arch="riscv32", os="none", families=(), pointer_width=32)
        evaluator = PredicateEvaluator(target_lookup=lambda triple: custom)
        assert evaluator.evaluate('cfg(target_arch = "riscv32")', "my-board")
        assert not evaluator.evaluate("cfg(unix)", "my-board")


class TestTargets:
    """Builtin target database."""

    def test_lookup(self):
        info = lookup_target(LINUX)
        assert info.arch == "x86_64"
        assert info.os == "linux"
        assert info.env == "gnu"
        assert info.families == ("unix",)

    def test_attribute(self):
        info = lookup_target("i686-pc-windows-msvc")
        assert info.attribute("pointer_width") == ("32",)
        assert info.attribute("family") == ("windows",)

    def test_unknown(self):
        assert get_builtin_target("nope") is None
        with pytest.raises(UnknownTargetError):
            lookup_target("nope")

    def test_embedded_target(self):
        info = lookup_target("thumbv7m-none-eabi")
        assert info.arch == "arm"
        assert info.os == "none"
        assert info.abi == "eabi"
        assert info.families == ()
        assert info.pointer_width == 32
        assert evaluate('cfg(target_os = "none")', "thumbv7m-none-eabi")
        assert not evaluate("cfg(unix)", "thumbv7m-none-eabi")

    def test_wasi_target(self):
        info = lookup_target("wasm32-wasip1")
        assert info.os == "wasi"
        assert info.env == "p1"
        assert evaluate("cfg(wasm)", "wasm32-wasip1")
        assert not evaluate("cfg(unix)", "wasm32-wasip1")

    @pytest.mark.parametrize("triple", [
        "aarch64-unknown-none",
        "x86_64-pc-windows-gnullvm",
        "riscv64gc-unknown-linux-musl",
        "armv7-unknown-linux-gnueabi",
        "wasm32-wasi",
        "x86_64-unknown-linux-gnux32",
        "aarch64-apple-ios-macabi",
        "powerpc-unknown-linux-gnu",
        "i586-unknown-linux-gnu",
        "x86_64-unknown-redox",
        "aarch64-linux-android",
    ])
    def test_rustc_targets_are_builtin(self, triple):
        assert lookup_target(triple).triple == triple

    def test_table_is_consistent(self):
        assert len(BUILTIN_TARGETS) > 200
        for triple, info in BUILTIN_TARGETS.items():
            assert info.triple == triple
            assert info.endian in ("little", "big")
            assert info.pointer_width in (16, 32, 64)
            assert set(info.families) <= {"unix", "windows", "wasm"}

    def test_gnux32_is_32_bit(self):
        info = lookup_target("x86_64-unknown-linux-gnux32")
        assert info.arch == "x86_64"
        assert info.attribute("pointer_width") == ("32",)

    def test_fallback_for_missing_triple(self):
        custom = TargetInfo(triple="my-board", arch="riscv32", os="none", pointer_width=32)
        seen = []

        def fallback(triple):
            seen.append(triple)
            return custom

        assert lookup_target(LINUX, fallback=fallback).os == "linux"
        assert lookup_target("my-board", fallback=fallback) is custom
        assert seen == ["my-board"]
