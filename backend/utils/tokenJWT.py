# utils/tokenJWT.py
import logging
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError, ExpiredSignatureError
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import Settings
from utils.errors import InvalidTokenError, ExpiredTokenError

logger = logging.getLogger(__name__)

# auto_error=False so a missing header gets our own 401 body instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


# Sign a token whose subject is the user id
def create_access_token(user_id: str, settings: Settings, expires_delta: timedelta = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None
                    else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": user_id, "iat": now, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


# Check signature and expiry, return the embedded user id
def verify_access_token(token: str, settings: Settings) -> str:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM],
            options={"require_exp": True},
        )
    except ExpiredSignatureError:
        raise ExpiredTokenError("Token expired")
    except JWTError as exc:
        raise InvalidTokenError(str(exc))

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token has no subject")
    return user_id


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# Resolve the caller's user id from the bearer token; the user row is not loaded
def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> str:
    if credentials is None:
        raise _unauthorized("Not authenticated")

    settings: Settings = request.app.state.settings
    try:
        user_id = verify_access_token(credentials.credentials, settings)
    except ExpiredTokenError:
        raise _unauthorized("Token expired")
    except InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise _unauthorized("Invalid token")

    request.state.user_id = user_id
    return user_id
