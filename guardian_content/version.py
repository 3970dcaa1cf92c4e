"""
Version information for guardian-content package.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("guardian-content")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.0.0+unknown"
