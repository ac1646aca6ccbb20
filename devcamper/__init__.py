"""DevCamper API: bootcamp directory REST service.

The ASGI application lives in devcamper.asgi; devcamper.main runs it under uvicorn.
"""

__version__ = "1.0.0"
