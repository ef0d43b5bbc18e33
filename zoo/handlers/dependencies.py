import logging

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from pydantic import ValidationError

from zoo import config
from zoo import schemas
from zoo.utils import exceptions

logger = logging.getLogger(__name__)

# tokens are issued by the staff login service, tokenUrl only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def get_current_staff(token: str | None = Depends(oauth2_scheme)) -> schemas.StaffIdentity:
    if token is None:
        raise exceptions.credentials_exception
    settings = config.get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.access_token_alg])
        staff = schemas.StaffIdentity(**payload)
    except (JWTError, ValidationError) as e:
        logger.warning('Rejected access token: %s', e)
        raise exceptions.credentials_exception
    if staff.subject is None:
        logger.warning('Rejected access token without id or sub claim')
        raise exceptions.credentials_exception
    return staff
