"""Infrastructure layer — integration with the process's text streams.

Every raw I/O exception must be caught here and re-raised as an
:class:`~age_greeter.exceptions.AgeGreeterError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from age_greeter.infra.line_source import StreamLineSource

__all__: list[str] = ["StreamLineSource"]
