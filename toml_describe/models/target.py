"""Target platform models and the builtin triple database."""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from toml_describe.core.errors import UnknownTargetError
from toml_describe.models.builtin_targets import TARGET_TABLE


class TargetInfo(BaseModel):
    """Platform attributes of one target triple, as seen by cfg predicates."""
    model_config = ConfigDict(frozen=True)

    triple: str
    arch: str
    vendor: str = "unknown"
    os: str = "none"
    env: str = ""
    abi: str = ""
    families: tuple[str, ...] = Field(default_factory=tuple)
    endian: str = "little"
    pointer_width: int = 64

    def attribute(self, key: str) -> tuple[str, ...]:
        """Values a ``target_<key>`` predicate can match against."""
        if key == "family":
            return self.families
        if key == "pointer_width":
            return (str(self.pointer_width),)
        return (getattr(self, key),)


def _row(line: str) -> TargetInfo:
    triple, arch, vendor, os, env, abi, families, endian, width = line.split()

    def value(field: str) -> str:
        return "" if field == "-" else field

    return TargetInfo(
        triple=triple,
        arch=arch,
        vendor=vendor,
        os=os,
        env=value(env),
        abi=value(abi),
        families=tuple(value(families).split(",")) if value(families) else (),
        endian=endian,
        pointer_width=int(width),
    )


BUILTIN_TARGETS: dict[str, TargetInfo] = {
    info.triple: info
    for info in (_row(line) for line in TARGET_TABLE.splitlines() if line.strip())
}


def get_builtin_target(triple: str) -> Optional[TargetInfo]:
    """Look up a triple, returning None when it is not known."""
    return BUILTIN_TARGETS.get(triple)


def lookup_target(
    triple: str,
    fallback: Optional[Callable[[str], TargetInfo]] = None,
) -> TargetInfo:
    """Look up a triple, failing when it is not known.

    Triples missing from the builtin table are handed to ``fallback`` (usually
    a compiler query) when one is given.
    """
    info = get_builtin_target(triple)
    if info is not None:
        return info
    if fallback is not None:
        return fallback(triple)
    raise UnknownTargetError(f"Unknown target triple '{triple}'", triple=triple)
