"""Toolchain descriptor model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from semantic_version import Version

from toml_describe.core.errors import ToolchainProbeError


class ToolchainDescriptor(BaseModel):
    """Version and release channel of the compiler driving this build.

    Built once by the caller (usually from ``rustc --version --verbose``) and
    handed to the evaluation entrypoints explicitly.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    version: Version
    is_prerelease: bool = Field(default=False, description="True on nightly/pre-release toolchains")

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value):
        if isinstance(value, Version):
            return value
        if isinstance(value, str):
            try:
                return Version(value.strip())
            except ValueError as e:
                raise ToolchainProbeError(
                    f"Invalid compiler version {value!r}",
                    output=value,
                    cause=e,
                ) from e
        raise ToolchainProbeError(f"Toolchain version must be a semantic version, got {value!r}")

    @field_validator("is_prerelease", mode="before")
    @classmethod
    def _check_channel(cls, value):
        if not isinstance(value, bool):
            raise ToolchainProbeError(f"Toolchain channel flag must be a bool, got {value!r}")
        return value

    @classmethod
    def from_release(cls, release: str, marker: str = "nightly") -> "ToolchainDescriptor":
        """Build a descriptor from a release token such as ``1.75.0-nightly``.

        Only a suffix equal to ``marker`` selects the pre-release channel;
        ``1.75.0-beta.3`` is treated as stable.
        """
        token = release.strip()
        raw_version, _, suffix = token.partition("-")
        try:
            version = Version(raw_version)
        except ValueError as e:
            raise ToolchainProbeError(
                f"Invalid compiler version {raw_version!r}",
                output=release,
                cause=e,
            ) from e
        return cls(version=version, is_prerelease=suffix == marker)

    @property
    def channel(self) -> str:
        return "pre-release" if self.is_prerelease else "stable"

    def __str__(self) -> str:
        return f"{self.version} ({self.channel})"
