"""HTTP middleware."""

from talkto.middleware.rate_limit import RateLimitMiddleware

__all__ = ["RateLimitMiddleware"]
