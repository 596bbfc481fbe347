"""HTTP middleware: request ID and access log.

Applied in the main app. Import and use from charfinder.main.
"""

from charfinder.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
