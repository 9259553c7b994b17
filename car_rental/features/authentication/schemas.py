from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

from car_rental.db.models.users import UserRole

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=64)]

# ---------- Inputs ----------

class SignUpIn(BaseModel):
    username: Username
    password: str = Field(min_length=1, max_length=72)  # limite bcrypt (en octets, vérifiée au hachage)
    role: Optional[UserRole] = None

class LoginIn(BaseModel):
    username: str
    password: str

class SettingsIn(BaseModel):
    password: Optional[str] = Field(default=None, max_length=72)

    @field_validator("password", mode="before")
    @classmethod
    def empty_means_unchanged(cls, v):
        # "" = pas de nouveau mot de passe, comme un champ absent
        return v or None


# ---------- Outputs ----------

class UserOut(BaseModel):
    username: str
    role: UserRole

class LoginOut(BaseModel):
    token: str
    user: UserOut

class SettingsOut(BaseModel):
    message: str
    user: UserOut
