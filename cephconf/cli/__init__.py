"""cephconf CLI package.

A command-line tool for rendering Ceph config files and keyrings.
"""

from importlib.metadata import version

try:
    __version__ = version("cephconf")
except ImportError:
    # Package is not installed
    __version__ = "0.1.0"

# Export the app for external use
from .cli import app

__all__ = ["app", "__version__"]
