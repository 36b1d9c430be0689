from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from fastapi import HTTPException, status, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Optional
from . import schemas
from .config import PaymentSettings

# tokens are issued by the marketplace auth service; this service only validates them
bearer_scheme = HTTPBearer(auto_error=False)    # missing header handled below as a 401

ACCESS_TOKEN_EXPIRE_MINUTES = 60


def create_access_token(data: dict, secret: str, algorithm: str = "HS256", expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, key=secret, algorithm=algorithm)


def verify_access_token(token: str, secret: str, algorithm: str, credentials_exception):
    try:
        payload = jwt.decode(token, key=secret, algorithms=[algorithm])
        user_id = payload.get("user_id")

        if user_id is None:
            raise credentials_exception

        token_data = schemas.TokenData(id=str(user_id), role=payload.get("role"))

    except JWTError:
        raise credentials_exception

    return token_data


def get_settings(request: Request) -> PaymentSettings:
    return request.app.state.settings


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: PaymentSettings = Depends(get_settings),
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    return verify_access_token(
        credentials.credentials,
        settings.jwt_secret.get_secret_value(),
        settings.jwt_algorithm,
        credentials_exception,
    )
