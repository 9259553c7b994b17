from enum import Enum

from sqlmodel import Field

from .base import BaseModelDB


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True)
    hashed_password: str
    role: UserRole = Field(default=UserRole.USER)
