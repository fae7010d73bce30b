"""Exceptions raised by neutron_cluster."""


class ConfigurationError(ValueError):
    """Invalid run configuration, raised before any simulation state is built."""
