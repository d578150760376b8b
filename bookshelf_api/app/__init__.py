"""
Application package initializer.

The service is split into three thin layers: route registration
(``api``), request handlers (``api/endpoints``) and data access
(``services``).  Pydantic payload models live in ``schemas`` and the
shared infrastructure (configuration, logging, the database handle)
in ``core``.
"""

from .main import app  # noqa: F401
