"""Exceptions raised by FlowForge."""


class ConfigError(ValueError):
    """A parameter bundle or constructor argument was rejected.

    Raised at the boundary, before any curve is traced, and also when a
    traced curve turns out to contain non-finite coordinates.
    """
