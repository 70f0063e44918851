# skillmatch/middleware/auth_middleware.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt  # PyJWT
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from skillmatch.config import JWT_SECRET, JWT_ALGO, JWT_EXPIRES_MIN, JWT_LEEWAY_SEC

# NOTE: auto_error=False so we can consistently return 401 on problems
security = HTTPBearer(auto_error=False)

# ---------- PUBLIC ALLOW-LIST (no auth required) ----------
PUBLIC_PATHS = {
    "/", "/health", "/openapi.json", "/docs", "/redoc", "/favicon.ico",
    "/api/v1/auth/login",
    "/api/v1/auth/signup",
    "/api/v1/jobs",          # catalog is public; matches are not
    "/api/v1/ui/nav",        # renders the logged-out variant for anonymous users
}

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}

# ---------- Token creation ----------
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)

def create_access_token(sub: str, extra: Optional[Dict[str, Any]] = None, minutes: Optional[int] = None) -> str:
    """
    Create a short-lived ACCESS token.
    `sub` should be the user's stable id (string).
    """
    if not isinstance(sub, str) or not sub.strip():
        raise ValueError("sub must be a non-empty string")

    exp_min = minutes if minutes is not None else JWT_EXPIRES_MIN
    now = _now_utc()
    payload: Dict[str, Any] = {
        "sub": sub,
        "typ": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=exp_min)).timestamp()),
    }
    if extra:
        payload.update(extra)
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGO)

# ---------- Token decoding / validation ----------
def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode & validate token. Raises 401 on any auth failure.
    """
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGO], leeway=JWT_LEEWAY_SEC)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired", headers=_UNAUTHORIZED_HEADERS)
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Invalid token", headers=_UNAUTHORIZED_HEADERS)

# ---------- FastAPI dependencies ----------
def require_claims(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Dict[str, Any]:
    """
    Strict auth dependency. Returns the validated claims dict.
    Always raises 401 (not 403) if header is missing/invalid.
    """
    if credentials is None or not credentials.scheme or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header",
                            headers=_UNAUTHORIZED_HEADERS)

    token = (credentials.credentials or "").strip()
    if not token:
        raise HTTPException(status_code=401, detail="Missing token", headers=_UNAUTHORIZED_HEADERS)

    return decode_token(token)

def _sub_to_user_id(sub: Any) -> Optional[int]:
    try:
        return int(sub)
    except (TypeError, ValueError):
        return None

def require_user_id(claims: Dict[str, Any] = Depends(require_claims)) -> int:
    """
    Returns the authenticated user's id (the `sub` claim) as an int.
    """
    user_id = _sub_to_user_id(claims.get("sub"))
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token subject", headers=_UNAUTHORIZED_HEADERS)
    return user_id

def optional_claims(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Optional[Dict[str, Any]]:
    """
    Soft auth dependency. Returns claims if a valid Bearer token is present,
    otherwise returns None (no exception).
    """
    if credentials is None:
        return None
    if not credentials.scheme or credentials.scheme.lower() != "bearer":
        return None
    token = (credentials.credentials or "").strip()
    if not token:
        return None
    try:
        return decode_token(token)
    except HTTPException:
        # Treat invalid/missing as anonymous for optional paths
        return None

def optional_user_id(claims: Optional[Dict[str, Any]] = Depends(optional_claims)) -> Optional[int]:
    """
    Returns user id (sub) if present/valid, else None.
    """
    if not claims:
        return None
    return _sub_to_user_id(claims.get("sub"))

# ---------- Starlette middleware (allow-list + bearer enforcement) ----------
class AuthMiddleware(BaseHTTPMiddleware):
    """
    Request-level guard: lets public paths through; enforces Bearer on others.
    Also exposes decoded claims via request.state.claims and request.state.user_id.
    """
    def __init__(self, app, excluded_paths: Optional[set] = None):
        super().__init__(app)
        self.excluded_paths = set(excluded_paths) if excluded_paths is not None else set(PUBLIC_PATHS)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        method = request.method.upper()

        # Always allow CORS preflights
        if method == "OPTIONS":
            return await call_next(request)

        # Allow exact public paths and their trailing-slash variants
        if path in self.excluded_paths or (path.endswith("/") and path[:-1] in self.excluded_paths):
            return await call_next(request)

        # For everything else, require Authorization: Bearer <token>
        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return JSONResponse({"detail": "Not authenticated"}, status_code=401,
                                headers=_UNAUTHORIZED_HEADERS)

        token = auth.split(" ", 1)[1].strip()
        try:
            claims = decode_token(token)
        except HTTPException as e:
            return JSONResponse({"detail": e.detail}, status_code=e.status_code,
                                headers=_UNAUTHORIZED_HEADERS)

        # Stash for handlers that want to read from request.state
        request.state.claims = claims
        request.state.user_id = _sub_to_user_id(claims.get("sub"))

        return await call_next(request)

__all__ = [
    "create_access_token", "decode_token",
    "require_claims", "require_user_id", "optional_claims", "optional_user_id",
    "PUBLIC_PATHS", "AuthMiddleware",
]
