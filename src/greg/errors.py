"""Errors raised while generating a loader."""


class GregError(Exception):
    """Base class for fatal generator errors."""


class ConfigurationError(GregError):
    """A command line value could not be understood."""


class RegistryError(GregError):
    """The registry document could not be parsed."""


class TemplateError(GregError):
    """A template file could not be read."""
