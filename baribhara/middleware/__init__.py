"""Raw ASGI middleware (request ID, timeout)."""

from baribhara.middleware.request_id import RequestIDMiddleware
from baribhara.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
