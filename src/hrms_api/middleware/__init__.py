"""Middleware package."""

from hrms_api.middleware.request_id_middleware import RequestIDMiddleware

__all__ = [
    "RequestIDMiddleware",
]
