"""
➡️ But : Authentification = stockage des identifiants + émission/vérification des tokens.

CredentialStore : inscription, vérification du couple username/password, rotation du mot de passe.

TokenService : émet et vérifie les access tokens signés (id + rôle, expiration 1h).

Les deux lèvent les erreurs de car_rental.core.errors ; aucune HTTPException ici.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from jose import JWTError
from sqlalchemy.exc import IntegrityError

from car_rental.core.errors import AuthError, NotFoundError, ValidationError
from car_rental.db.models.users import User, UserRole
from car_rental.db.repositories.users import UserRepository
from car_rental.security.password import (
    DEFAULT_ROUNDS,
    MAX_PASSWORD_BYTES,
    hash_password,
    verify_password,
)
from car_rental.security.tokens import JWTSettings, create_access_token, decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Identité résolue depuis un token, attachée au contexte de la requête."""
    id: int
    role: str


class CredentialStore:
    def __init__(self, *, user_repo: UserRepository, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self.user_repo = user_repo
        self.bcrypt_rounds = bcrypt_rounds

    # ---------- Sign up ----------
    def register(self, username: str, password: str, role: Optional[UserRole] = None) -> User:
        if not username or not username.strip() or not password:
            raise ValidationError("Username and password are required")
        if self.user_repo.get_by_username(username):
            raise ValidationError("Username already exists")

        try:
            user = self.user_repo.create(
                username=username,
                hashed_password=self._hash(password),
                role=role or UserRole.USER,
            )
        except IntegrityError:
            # inscription concurrente du même username
            self.user_repo.rollback()
            raise ValidationError("Username already exists")

        logger.info("User registered: id=%s role=%s", user.id, _role_value(user.role))
        return user

    # ---------- Login ----------
    def verify(self, username: str, password: str) -> User:
        user = self.user_repo.get_by_username(username)
        if not user or not verify_password(password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            raise AuthError("Invalid credentials")
        return user

    # ---------- Settings ----------
    def rotate_secret(self, user_id: int, new_password: Optional[str] = None) -> User:
        user = self.user_repo.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        if not new_password:
            return user

        user = self.user_repo.update(
            user,
            hashed_password=self._hash(new_password),
        )
        logger.info("Password rotated for user id=%s", user.id)
        return user

    def _hash(self, password: str) -> str:
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return hash_password(password, rounds=self.bcrypt_rounds)


class TokenService:
    def __init__(
        self,
        *,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.jwt = jwt_settings
        self.now_fn = now_fn

    def issue(self, user: User) -> str:
        return create_access_token(
            user_id=user.id,
            role=_role_value(user.role),
            settings=self.jwt,
            now_fn=self.now_fn,
        )

    def verify(self, token: str) -> Identity:
        try:
            decoded = decode_token(token, self.jwt, now_fn=self.now_fn)
        except JWTError:
            raise AuthError("Unauthorized")

        user_id = decoded.get("id")
        role = decoded.get("role")
        if not isinstance(user_id, int) or not isinstance(role, str):
            raise AuthError("Unauthorized")
        return Identity(id=user_id, role=role)


def _role_value(role) -> str:
    return role.value if isinstance(role, UserRole) else str(role)
