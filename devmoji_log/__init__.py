"""Recent git activity with conventional commit parsing and devmoji."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("devmoji-log")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
