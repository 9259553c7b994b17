"""
➡️ But : Base commune des schémas d'entrée/sortie de l'API.

Le JSON exposé est en camelCase (registrationNo, pricePerDay, rentFrom...),
les attributs Python restent en snake_case. Les deux formes sont acceptées en entrée.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# plus grand entier stockable dans une colonne INTEGER (64 bits signés)
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class MessageOut(BaseModel):
    message: str
