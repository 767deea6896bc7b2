"""Package metadata and naming constants."""

PACKAGE_NAME = "gof-patterns"
__version__ = "1.0.0"  # Version for imports
VERSION = __version__
DESCRIPTION = "Runnable catalog of Gang of Four design pattern demonstrations"
