"""Tests for the enablement engine and the end-to-end evaluation."""

from unittest.mock import patch

import pytest

from toml_describe.core.engine import evaluate, evaluate_manifest, select
from toml_describe.core.errors import PredicateError
from toml_describe.core.manifest import parse_manifest
from toml_describe.models.condition import Condition, VersionRange

LINUX = "x86_64-unknown-linux-gnu"
WINDOWS = "x86_64-pc-windows-msvc"

SECTION = "[package.metadata.toml_describe.compiler_checks"


def cond(version=None, nightly=None, cfg=None) -> Condition:
    return Condition(
        version=VersionRange.parse(version) if version else None,
        nightly_version=VersionRange.parse(nightly) if nightly else None,
        cfg=cfg,
    )


class TestScenarios:
    """Reference scenarios for the whole pipeline."""

    def test_direct_match(self, manifest, stable):
        text = manifest('foo = { version = "1.0.0" }\n')
        assert evaluate_manifest(text, LINUX, stable("1.0.0")) == ["foo"]

    def test_no_match(self, manifest, stable):
        text = manifest('foo = { version = "2.0.0" }\n')
        assert evaluate_manifest(text, LINUX, stable("1.0.0")) == []

    def test_platform_scoping(self, manifest, stable):
        text = manifest(
            f"{SECTION}.'cfg(target_os = \"linux\")']\n"
            'bar = { version = "1.2.0" }\n'
        )
        assert evaluate_manifest(text, LINUX, stable("1.2.0")) == ["bar"]

        with patch.object(Condition, "satisfies", autospec=True, side_effect=Condition.satisfies) as spy:
            assert evaluate_manifest(text, WINDOWS, stable("1.2.0")) == []
        spy.assert_not_called()

    def test_malformed_predicate(self, manifest, stable, nightly):
        text = manifest(
            'foo = { version = "1.0.0" }\n'
            f"{SECTION}.'cfg(target_os == \"linux\")']\n"
            'bar = { version = ">= 1.0" }\n'
        )
        for toolchain in (stable("1.0.0"), nightly("1.0.0")):
            with pytest.raises(PredicateError):
                evaluate_manifest(text, LINUX, toolchain)

    @pytest.mark.parametrize("triple, expected", [
        ("thumbv7m-none-eabi", ["foo"]),
        ("aarch64-unknown-none", ["foo"]),
        ("wasm32-wasip1", ["foo"]),
        ("riscv64gc-unknown-linux-musl", ["foo", "bar"]),
        ("x86_64-pc-windows-gnullvm", ["foo"]),
        ("x86_64-unknown-redox", ["foo", "bar"]),
    ])
    def test_platform_group_on_less_common_targets(self, manifest, stable, triple, expected):
        text = manifest(
            'foo = { version = ">= 1.0" }\n'
            f"{SECTION}.'cfg(unix)']\n"
            'bar = { version = ">= 1.0" }\n'
        )
        assert evaluate_manifest(text, triple, stable()) == expected


class TestSelect:
    """The filter itself."""

    def test_keeps_order(self, stable):
        pairs = [("c", cond(">= 1")), ("a", cond("< 1")), ("b", cond(">= 1"))]
        assert evaluate(pairs, stable()) == ["c", "b"]

    def test_duplicates_are_independent(self, stable):
        pairs = [("foo", cond(">= 1")), ("bar", cond(">= 1")), ("foo", cond(">= 1", cfg="foo2"))]
        assert evaluate(pairs, stable()) == ["foo", "bar", "foo"]

        selected = select(pairs, stable())
        assert [c.cfg for _, c in selected] == [None, None, "foo2"]

    def test_duplicate_dropped_when_one_fails(self, stable):
        pairs = [("foo", cond(">= 1")), ("foo", cond(">= 99"))]
        assert evaluate(pairs, stable()) == ["foo"]

    def test_channel_selection(self, stable, nightly):
        pairs = [
            ("stable_only", cond(">= 1.0")),
            ("nightly_only", cond(nightly=">= 1.0")),
            ("both", cond(">= 1.80", ">= 1.70")),
            ("neither", cond()),
        ]
        assert evaluate(pairs, stable("1.75.0")) == ["stable_only"]
        assert evaluate(pairs, nightly("1.75.0")) == ["nightly_only", "both"]

    def test_empty(self, stable):
        assert evaluate([], stable()) == []

    def test_accepts_iterators(self, stable):
        pairs = iter([("foo", cond(">= 1"))])
        assert evaluate(pairs, stable()) == ["foo"]


class TestProperties:
    """Behaviour across the pipeline."""

    TEXT = (
        'let_else = { version = ">= 1.65", nightly_version = ">= 1.64" }\n'
        'async_traits = { nightly_version = ">= 1.70" }\n'
        f"{SECTION}.'cfg(unix)']\n"
        'fd_api = { version = ">= 1.60" }\n'
        'let_else = { version = ">= 1.0" }\n'
        f"{SECTION}.'cfg(windows)']\n"
        'win_api = { version = ">= 1.60" }\n'
    )

    def test_idempotent(self, manifest, stable):
        text = manifest(self.TEXT)
        first = evaluate_manifest(text, LINUX, stable("1.75.0"))
        second = evaluate_manifest(text, LINUX, stable("1.75.0"))
        assert first == second == ["let_else", "fd_api", "let_else"]

    def test_nightly_run(self, manifest, nightly):
        text = manifest(self.TEXT)
        assert evaluate_manifest(text, LINUX, nightly("1.75.0")) == ["let_else", "async_traits"]

    def test_skipped_group_never_checked(self, manifest, stable):
        pairs = parse_manifest(manifest(self.TEXT), WINDOWS)
        assert "fd_api" not in [name for name, _ in pairs]

        with patch.object(Condition, "satisfies", autospec=True, side_effect=Condition.satisfies) as spy:
            evaluate(pairs, stable("1.75.0"))
        assert spy.call_count == len(pairs) == 3
