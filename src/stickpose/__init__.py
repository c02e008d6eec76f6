"""stickpose - stick-figure pose editor with a 2D kinematic constraint engine."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stickpose")
except PackageNotFoundError:
    __version__ = "unknown"
