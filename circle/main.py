"""ASGI entrypoint.

Logfire must be configured before this module is imported;
scripts/start_app.py handles this.
"""

from circle.interface.api.app import create_app

app = create_app()
