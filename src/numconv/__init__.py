"""numconv — interactive number system converter.

Converts between binary, octal, decimal and hexadecimal through a
decimal intermediate value, with a layered core/cli architecture.
"""

from numconv.version import __version__

__all__: list[str] = ["__version__"]
