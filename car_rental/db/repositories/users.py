"""
➡️ But : Encapsuler toutes les opérations de base de données sur la table User.

Ne contient aucune logique métier, juste de la persistance.
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from car_rental.db.repositories.base import BaseRepository
from car_rental.db.models.users import User


class UserRepository(BaseRepository[User]):
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        """Retourne un utilisateur par son nom d'utilisateur."""
        return self.session.exec(
            select(self.model).where(self.model.username == username)
        ).first()
