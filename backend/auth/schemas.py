# backend/auth/schemas.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginSchema(BaseModel):
    # plain string: a malformed address is just another unknown account
    email: str = Field(..., min_length=1)
    password: str
