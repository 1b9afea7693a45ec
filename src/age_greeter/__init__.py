"""age-greeter — interactive name and age greeter.

Reads a name and a range-checked age from the console with a bounded
retry budget, then prints a greeting.
"""

from age_greeter.version import __version__

__all__: list[str] = ["__version__"]
