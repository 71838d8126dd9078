"""
In-memory sliding-window rate limiter for the auth endpoints.
"""
import logging
import time
from collections import defaultdict, deque
from typing import Deque, Dict

from fastapi import Request, HTTPException, status

from app.core.config import RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS

logger = logging.getLogger(__name__)

# {client ip: timestamps of recent requests}
rate_limit_store: Dict[str, Deque[float]] = defaultdict(deque)


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request, honouring X-Forwarded-For."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    
    if request.client:
        return request.client.host
    
    return "unknown"


def check_rate_limit(request: Request, max_requests: int, window_seconds: int) -> None:
    """
    Record a request and reject it when the client is over its budget.
    
    Args:
        request: FastAPI request object
        max_requests: Maximum number of requests allowed in the window
        window_seconds: Window length in seconds
        
    Raises:
        HTTPException: 429 if rate limit exceeded
    """
    ip = get_client_ip(request)
    now = time.time()
    cutoff = now - window_seconds
    
    # Forget clients whose whole window has expired
    for stale_ip in [key for key, times in rate_limit_store.items() if not times or times[-1] <= cutoff]:
        del rate_limit_store[stale_ip]
    
    hits = rate_limit_store[ip]
    while hits and hits[0] <= cutoff:
        hits.popleft()
    
    if len(hits) >= max_requests:
        logger.warning(f"Rate limit exceeded for IP: {ip} ({len(hits)} requests in {window_seconds}s)")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many attempts, try again later."
        )
    
    hits.append(now)


def auth_rate_limit(request: Request) -> None:
    """Dependency applying the configured auth budget."""
    check_rate_limit(request, RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW_SECONDS)
