"""GREG - an OpenGL extension loader generator."""

__version__ = "0.1.0"

from .errors import ConfigurationError, GregError, RegistryError, TemplateError
from .manifest import resolve
from .output import assemble
from .registry import load_registry
from .template import substitute
from .types import FeatureRecord, Manifest, OutputBundle, Profile, Target, Version

__all__ = [
    "resolve",
    "assemble",
    "substitute",
    "load_registry",
    "Target",
    "Version",
    "Profile",
    "Manifest",
    "FeatureRecord",
    "OutputBundle",
    "GregError",
    "ConfigurationError",
    "RegistryError",
    "TemplateError",
]
