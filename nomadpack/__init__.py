"""Flag sets, spinner, template helpers, logging and filesystem utilities for pack tooling."""

__version__ = "0.1.0"