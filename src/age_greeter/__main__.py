"""Allow ``python -m age_greeter`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m age_greeter`` behaves identically to the ``age-greeter``
console script.
"""

from __future__ import annotations

from age_greeter.cli.app import cli

if __name__ == "__main__":
    cli()
