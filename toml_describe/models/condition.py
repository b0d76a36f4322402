"""Condition and constraint models.

A manifest entry is either a single condition::

    foo = { version = ">= 1.60", nightly_version = ">= 1.58" }

or a group of conditions scoped by a platform predicate::

    [package.metadata.toml_describe.compiler_checks.'cfg(target_os = "linux")']
    bar = { version = "1.2.0" }
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from semantic_version import SimpleSpec, Version

from toml_describe.core.errors import ManifestFormatError, VersionSyntaxError
from toml_describe.models.toolchain import ToolchainDescriptor

# Keys allowed in a single condition table
CONDITION_KEYS = ("version", "nightly_version", "cfg")

_WHITESPACE = re.compile(r"\s+")
_CLAUSE = re.compile(r"([<>=^~!]*)([^-+]*)(.*)")


def _normalize_wildcards(compact: str) -> str:
    """Spell ``x``/``X`` version components as ``*``, e.g. ``1.x`` -> ``1.*``."""
    clauses = []
    for clause in compact.split(","):
        op, version, rest = _CLAUSE.match(clause).groups()
        version = ".".join("*" if part in ("x", "X") else part for part in version.split("."))
        clauses.append(f"{op}{version}{rest}")
    return ",".join(clauses)


class VersionRange:
    """A parsed version requirement that remembers its source text."""

    __slots__ = ("text", "_key", "_spec")

    def __init__(self, text: str, spec: SimpleSpec):
        self.text = text
        self._key = _WHITESPACE.sub("", text)
        self._spec = spec

    @classmethod
    def parse(cls, text: str, capability: Optional[str] = None) -> "VersionRange":
        if not isinstance(text, str):
            raise VersionSyntaxError(
                "Version requirement must be a string",
                capability=capability,
                requirement=repr(text),
            )
        compact = _WHITESPACE.sub("", text)
        if not compact:
            raise VersionSyntaxError(
                "Empty version requirement",
                capability=capability,
                requirement=text,
            )
        try:
            spec = SimpleSpec(_normalize_wildcards(compact))
        except ValueError as e:
            raise VersionSyntaxError(
                f"Invalid version requirement {text!r}",
                capability=capability,
                requirement=text,
                cause=e,
            ) from e
        return cls(text, spec)

    def matches(self, version: Version) -> bool:
        return version in self._spec

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"VersionRange({self.text!r})"

    def __str__(self) -> str:
        return self.text


class Condition(BaseModel):
    """Version requirements for one capability.

    ``version`` applies to stable toolchains, ``nightly_version`` to
    pre-release ones. ``cfg`` overrides the emitted flag name.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: Optional[VersionRange] = None
    nightly_version: Optional[VersionRange] = None
    cfg: Optional[str] = Field(default=None, description="Emitted flag name override")

    @classmethod
    def from_table(cls, name: str, table: dict) -> "Condition":
        unknown = [key for key in table if key not in CONDITION_KEYS]
        if unknown:
            raise ManifestFormatError(
                f"Unknown key(s) {', '.join(sorted(unknown))} in capability '{name}'",
                entry=name,
                suggestion=f"Allowed keys are: {', '.join(CONDITION_KEYS)}",
            )

        cfg = table.get("cfg")
        if cfg is not None and (not isinstance(cfg, str) or not cfg):
            raise ManifestFormatError(
                f"'cfg' of capability '{name}' must be a non-empty string",
                entry=name,
            )

        return cls(
            version=_optional_range(table, "version", name),
            nightly_version=_optional_range(table, "nightly_version", name),
            cfg=cfg,
        )

    def satisfies(self, toolchain: ToolchainDescriptor) -> bool:
        """Check this condition against the toolchain's channel and version.

        The channels are exclusive: a stable-only requirement never enables a
        capability on a pre-release compiler, whatever its version number.
        """
        requirement = self.nightly_version if toolchain.is_prerelease else self.version
        if requirement is None:
            return False
        return requirement.matches(toolchain.version)


def _optional_range(table: dict, key: str, name: str) -> Optional[VersionRange]:
    if key not in table:
        return None
    return VersionRange.parse(table[key], capability=name)


class Direct(BaseModel):
    """An unscoped capability declaration."""
    model_config = ConfigDict(frozen=True)

    condition: Condition


class PlatformScoped(BaseModel):
    """Capability declarations that apply only when ``predicate`` holds."""
    model_config = ConfigDict(frozen=True)

    predicate: str
    members: dict[str, Condition] = Field(default_factory=dict)


Constraint = Union[Direct, PlatformScoped]
