from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlmodel import SQLModel, Session, select, func

from car_rental.db.models.base import utcnow

# Type générique pour le modèle (User, Car, Booking)
ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour les opérations CRUD standards.

    👉 Ne contient aucune logique métier.
    👉 Gère la persistance générique : create, read, update, delete, count, list.
    👉 Les repositories concrets définissent `model = MaClasseSQLModel`.
    👉 commit=False laisse le service orchestrer une transaction multi-écritures
       (le service appelle ensuite `commit()`).
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list(self) -> Sequence[ModelT]:
        return self.session.exec(select(self.model)).all()

    def count(self, **filters: Any) -> int:
        """Nombre d'enregistrements, filtré par égalité sur les colonnes passées."""
        statement = select(func.count()).select_from(self.model)
        for column, value in filters.items():
            statement = statement.where(getattr(self.model, column) == value)
        return self.session.exec(statement).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Retourne un enregistrement par son identifiant, ou None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        entity = self.model(**fields)
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        for key, value in changes.items():
            setattr(entity, key, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utcnow()
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        self.session.delete(entity)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    # ---------- TRANSACTION ----------

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def _persist(self, entity: ModelT, commit: bool) -> None:
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            # flush pour obtenir l'ID sans commit (utile pour FKs)
            self.session.flush()
