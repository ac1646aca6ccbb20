"""ASGI entrypoint.

Keeps module imports side-effect free: the FastAPI app is only created here.
"""

from devcamper.bootstrap import create_app

app = create_app()
