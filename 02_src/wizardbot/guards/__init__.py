"""Rate limiting and concurrency guards."""

from .processing import ProcessingGuard
from .rate_limiter import Clock, RateLimiter

__all__ = ["Clock", "ProcessingGuard", "RateLimiter"]
