"""
Version information for personal-accounts-mcp package.
"""

# The published version comes from pyproject.toml; this only reads it back
# from the installed distribution metadata.
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("personal-accounts-mcp")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.0.0+unknown"
