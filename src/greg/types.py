"""Data types for loader generation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional


class Version(NamedTuple):
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class Profile(Enum):
    CORE = "core"


@dataclass(frozen=True)
class RemoveScope:
    """Which profile a <remove> block applies to.

    A scope with no profile is unconditional: it applies whenever any
    profile is selected.
    """

    profile: Optional[str] = None

    def applies_to(self, profile: Optional[Profile]) -> bool:
        if profile is None:
            return False
        return self.profile is None or self.profile == profile.value


@dataclass(frozen=True)
class Target:
    """What to generate a loader for."""

    api: str = "gl"
    version: Version = Version(4, 4)
    profile: Optional[Profile] = None
    extensions: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FeatureRecord:
    """An accepted <feature>, e.g. GL_VERSION_3_2."""

    name: str  # "GL_VERSION_3_2"
    version: Version  # Version(3, 2)


@dataclass
class Manifest:
    """Names that must appear in the generated output."""

    types: set[str] = field(default_factory=set)
    enums: set[str] = field(default_factory=set)
    commands: set[str] = field(default_factory=set)
    versions: list[FeatureRecord] = field(default_factory=list)
    extensions: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return (
            f"{len(self.versions)} versions, {len(self.extensions)} extensions, "
            f"{len(self.types)} types, {len(self.enums)} enums, "
            f"{len(self.commands)} commands"
        )


@dataclass
class OutputBundle:
    """Generated text fragments, one buffer per template placeholder.

    Each field holds lines in registry order. The placeholder for a field
    is its upper-cased name between @ signs, e.g. ``@CMD_LOADERS@``.
    """

    type_typedefs: list[str] = field(default_factory=list)
    enum_definitions: list[str] = field(default_factory=list)
    ext_macros: list[str] = field(default_factory=list)
    ver_macros: list[str] = field(default_factory=list)
    ext_declarations: list[str] = field(default_factory=list)
    ver_declarations: list[str] = field(default_factory=list)
    ext_definitions: list[str] = field(default_factory=list)
    ver_definitions: list[str] = field(default_factory=list)
    ver_loaders: list[str] = field(default_factory=list)
    ext_loaders: list[str] = field(default_factory=list)
    cmd_typedefs: list[str] = field(default_factory=list)
    cmd_declarations: list[str] = field(default_factory=list)
    cmd_macros: list[str] = field(default_factory=list)
    cmd_definitions: list[str] = field(default_factory=list)
    cmd_loaders: list[str] = field(default_factory=list)

    def bindings(self) -> dict[str, str]:
        """Map each placeholder token to the text of its buffer."""
        return {
            f"@{name.upper()}@": "".join(lines)
            for name, lines in vars(self).items()
        }
