from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt

from zoo.config import get_settings


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a staff access token.

    ``data`` carries the identity claims read back by the auth dependency:
    ``id`` (or ``sub``) plus ``role``, ``staffRole`` and ``staffType``.
    """
    settings = get_settings()
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(hours=settings.access_token_expire_hours)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.access_token_alg)
