"""API Dependencies - Authentication"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from domain.auth import Operator, OperatorInDB
from infrastructure.config import settings
from infrastructure.security import get_password_hash, verify_password, decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


@lru_cache()
def _operators() -> dict:
    """Configured operator accounts, hashed on first access"""
    admin = OperatorInDB(
        username=settings.admin_username,
        full_name="Front Desk Administrator",
        hashed_password=get_password_hash(settings.admin_password)
    )
    return {admin.username: admin}


def get_operator(username: str) -> Optional[OperatorInDB]:
    return _operators().get(username)


def authenticate_operator(username: str, password: str) -> Optional[OperatorInDB]:
    operator = get_operator(username)
    if not operator or not verify_password(password, operator.hashed_password):
        return None
    return operator


async def get_current_operator(token: str = Depends(oauth2_scheme)) -> OperatorInDB:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        username = decode_access_token(token)
    except JWTError:
        raise credentials_exception
    if username is None:
        raise credentials_exception

    operator = get_operator(username)
    if operator is None:
        raise credentials_exception
    return operator


async def get_current_active_operator(current_operator: Operator = Depends(get_current_operator)):
    if current_operator.disabled:
        raise HTTPException(status_code=400, detail="Inactive operator")
    return current_operator
