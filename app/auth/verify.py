"""
verify.py
---------
Purpose:
    JWT verification for the live dashboard routes (HS256).

Notes:
    - Tokens are issued by the auth service and signed with JWT_SECRET.
    - The secret and audience come from the Settings the app was built
      with, falling back to the module-level settings.
    - Provides `auth_dependency` for protected routes and
      `current_user_id` for the dashboard routers.
"""

import jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.config import Settings, settings

_security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def verify_jwt(token: str, config: Settings | None = None) -> dict:
    config = config or settings
    if not config.JWT_SECRET:
        raise _unauthorized("Authentication is not configured")
    try:
        return jwt.decode(
            token,
            config.JWT_SECRET,
            algorithms=["HS256"],
            audience=config.JWT_AUDIENCE,
            options={"verify_exp": True},
        )
    except jwt.PyJWTError as e:
        raise _unauthorized(f"Invalid authentication token: {e}") from e


def auth_dependency(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> dict:
    if credentials is None:
        raise _unauthorized("Not authenticated")
    # Apps built by create_app carry their own Settings.
    return verify_jwt(credentials.credentials, getattr(request.app.state, "settings", None))


def current_user_id(claims: dict = Depends(auth_dependency)) -> str:
    user_id = claims.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token")
    return user_id
