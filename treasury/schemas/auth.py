from pydantic import BaseModel, Field

from .users import UserOut


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    user: UserOut


class CredentialsUpdate(BaseModel):
    new_username: str = Field(min_length=1, max_length=150)
    new_password: str = Field(min_length=1, max_length=128)
