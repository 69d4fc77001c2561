from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session
from app.config import settings
from app.database import get_session
from app.models.user import User
from app.services.user_service import UserService

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    expire = datetime.now(timezone.utc) + (
        expires_delta
        if expires_delta
        else timedelta(minutes=settings.access_token_expire_minutes)
    )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.algorithm
    )
    return encoded_jwt


def decode_access_token(token: str):
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
        return payload
    except JWTError:
        return None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_session)
) -> User:
    """
    Resolve the bearer token's identity to a local user, creating the user
    on first sight.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Token not provided or invalid format.")

    payload = decode_access_token(credentials.credentials)

    if payload is None:
        raise _unauthorized("Invalid token.")

    uid = payload.get("sub") or payload.get("uid")
    email = payload.get("email")

    if not uid or not email:
        raise _unauthorized("Invalid token payload")

    return UserService(session).find_or_create(
        uid=str(uid),
        email=email,
        name=payload.get("name"),
    )
