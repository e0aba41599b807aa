"""Per-client request throttling.

Each client IP gets a fixed window per rule. The public-trends endpoint has
the tightest rule because every request fans out to six Google Trends
queries, and Trends answers bursts with HTTP 429.
"""

import time
from dataclasses import dataclass, field
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

EXEMPT_PREFIXES = ("/static", "/health")


@dataclass(frozen=True)
class ThrottleRule:
    """Allow ``requests`` per ``window_seconds`` on paths under ``prefix``.

    An empty prefix matches every path.
    """

    name: str
    requests: int
    window_seconds: int
    prefix: str = ""

    def applies_to(self, path: str) -> bool:
        return path.startswith(self.prefix)


@dataclass
class Window:
    started_at: float = 0.0
    hits: int = 0


@dataclass
class ThrottleDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_at: int


# Most specific first; the last rule is the catch-all.
DEFAULT_RULES = [
    ThrottleRule("public-trends", requests=10, window_seconds=60, prefix="/api/public-trends"),
    ThrottleRule("api", requests=60, window_seconds=60, prefix="/api/"),
    ThrottleRule("reps", requests=30, window_seconds=60, prefix="/reps"),
    ThrottleRule("default", requests=120, window_seconds=60),
]


@dataclass
class ThrottleStore:
    """In-memory fixed-window counters keyed by (client, rule name)."""

    windows: dict[tuple[str, str], Window] = field(default_factory=dict)
    sweep_every: float = 60.0
    last_sweep: float = field(default_factory=time.time)
    max_window: float = 0.0

    def _sweep(self, now: float) -> None:
        if now - self.last_sweep < self.sweep_every:
            return
        # Windows of every rule seen so far must survive the sweep.
        horizon = self.max_window * 2
        self.windows = {
            key: window for key, window in self.windows.items()
            if now - window.started_at <= horizon
        }
        self.last_sweep = now

    def hit(self, client_id: str, rule: ThrottleRule, now: Optional[float] = None) -> ThrottleDecision:
        """Record a request and decide whether it may proceed."""
        now = time.time() if now is None else now
        self.max_window = max(self.max_window, rule.window_seconds)
        self._sweep(now)

        window = self.windows.setdefault((client_id, rule.name), Window(started_at=now))
        if now - window.started_at >= rule.window_seconds:
            window.started_at = now
            window.hits = 0

        reset_at = int(window.started_at + rule.window_seconds)
        if window.hits >= rule.requests:
            return ThrottleDecision(False, rule.requests, 0, reset_at)

        window.hits += 1
        return ThrottleDecision(True, rule.requests, rule.requests - window.hits, reset_at)


def client_id_for(request: Request) -> str:
    """First X-Forwarded-For hop, else the peer address."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


def rule_for(path: str, rules: list[ThrottleRule]) -> ThrottleRule:
    for rule in rules:
        if rule.applies_to(path):
            return rule
    return DEFAULT_RULES[-1]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients that exceed their window with 429 Too Many Requests."""

    def __init__(self, app, rules: Optional[list[ThrottleRule]] = None, store: Optional[ThrottleStore] = None):
        super().__init__(app)
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.store = store if store is not None else ThrottleStore()

    @staticmethod
    def _with_headers(response: Response, decision: ThrottleDecision) -> Response:
        response.headers["X-RateLimit-Limit"] = str(decision.limit)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        response.headers["X-RateLimit-Reset"] = str(decision.reset_at)
        return response

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if path.startswith(EXEMPT_PREFIXES):
            return await call_next(request)

        decision = self.store.hit(client_id_for(request), rule_for(path, self.rules))

        if not decision.allowed:
            retry_after = max(0, decision.reset_at - int(time.time()))
            response = JSONResponse(
                status_code=429,
                content={"error": "Too many requests. Please try again later.", "retry_after": retry_after},
            )
            response.headers["Retry-After"] = str(retry_after)
            return self._with_headers(response, decision)

        response = await call_next(request)
        return self._with_headers(response, decision)
