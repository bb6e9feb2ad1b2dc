"""
Middleware package for the application.
"""

from mototrack.middleware.metrics import MetricsMiddleware
from mototrack.middleware.request_id import RequestIDMiddleware

__all__ = [
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
