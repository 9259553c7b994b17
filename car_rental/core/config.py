"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL DB, secret JWT, port...)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings par défaut, mais create_app() accepte n'importe quelle instance :

from car_rental.core.config import Settings
app = create_app(Settings(DATABASE_URL="sqlite://"))


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (development / production / test).
"""

from datetime import timedelta
from typing import List

from pydantic_settings import BaseSettings

from car_rental.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Car-Rental-Back"
    ENV: str = "development"  # development | production | test

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]  # En production, remplace "*" par l'URL du front

    # -----------------------------
    # DB
    # -----------------------------
    DATABASE_URL: str = "sqlite:///car_rental.db"
    DB_ECHO: bool = False  # n'a d'effet qu'en development

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "your_jwt_secret"   # ⚠️ change en prod
    JWT_ISSUER: str = "car-rental-api"
    JWT_ALGORITHM: str = "HS256"

    ACCESS_TTL_MINUTES: int = 60

    BCRYPT_ROUNDS: int = 10

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @property
    def jwt(self) -> JWTSettings:
        """Objet JWT prêt à l'emploi pour les services."""
        return JWTSettings(
            secret=self.JWT_SECRET_KEY,
            issuer=self.JWT_ISSUER,
            algorithm=self.JWT_ALGORITHM,
            access_ttl=timedelta(minutes=self.ACCESS_TTL_MINUTES),
        )


# Instance par défaut (utilisée par `uvicorn car_rental.main:app`)
settings = Settings()
