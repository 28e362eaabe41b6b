"""Exceptions raised by todolint."""


class ConfigurationError(ValueError):
    """Invalid rule options. Raised once, while compiling matchers."""


class ManifestLookupError(Exception):
    """A project manifest could not be located or parsed."""
