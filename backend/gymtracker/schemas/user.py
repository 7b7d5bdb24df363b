from typing import Annotated
from pydantic import BaseModel, Field

from gymtracker.schemas.base import CamelModel

UsernameStr = Annotated[str, Field(min_length=1, max_length=120)]

class UserRegister(BaseModel):
    username: UsernameStr
    password: Annotated[str, Field(min_length=1, max_length=128)]

class UserLogin(BaseModel):
    # Missing fields fall through to "invalid credentials" rather than 400
    username: str = ""
    password: str = ""

class LoginResult(CamelModel):
    message: str
    token: str
    user_id: str
