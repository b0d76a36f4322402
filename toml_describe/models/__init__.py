"""Data models for toml-describe."""

from .toolchain import ToolchainDescriptor
from .condition import Condition, Constraint, Direct, PlatformScoped, VersionRange
from .target import TargetInfo, get_builtin_target, lookup_target

__all__ = [
    "ToolchainDescriptor",
    "Condition",
    "Constraint",
    "Direct",
    "PlatformScoped",
    "VersionRange",
    "TargetInfo",
    "get_builtin_target",
    "lookup_target",
]
