"""Upload a file as a GitHub release asset with a templated display name."""

__version__ = "1.1.0"
