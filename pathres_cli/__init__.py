"""Command-line path resolver.

`pathres r -f <path>` expands a leading ``~`` and prints the clean absolute
path; `pathres info` prints the build description, version and commit.
"""

__all__ = ["__version__", "__commit__", "DESCRIPTION"]

__version__ = "0.1.0"

# Stamped by the release build; empty in a source checkout.
__commit__ = ""

DESCRIPTION = "Used for get absolute from relative path"
