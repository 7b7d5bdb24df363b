# gymtracker/deps/auth.py
from typing import Optional

from fastapi import Header, HTTPException, status
from jose.exceptions import ExpiredSignatureError, JWTError

from gymtracker.security import decode_token

def get_current_user_id(authorization: Optional[str] = Header(None)) -> str:
    """
    Bind the caller's user id from `Authorization: Bearer <token>`.

    No header -> 401. A header whose credential does not decode to a user id
    (wrong scheme, bad signature, expired) -> 403. The id is not looked up;
    an unknown user simply owns nothing.
    """
    if authorization is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    forbidden = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise forbidden
    try:
        payload = decode_token(token)
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except JWTError:
        raise forbidden

    sub = payload.get("sub")
    if not sub:
        raise forbidden
    return str(sub)
