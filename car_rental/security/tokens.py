from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, TypedDict

from jose import jwt, JWTError

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens JWT.

    - `secret` : clé secrète HMAC pour signer/valider les tokens
    - `issuer` : émetteur (claim `iss`)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `access_ttl` : durée de vie d’un access token (1h par défaut)
    """
    secret: str
    issuer: str = "car-rental-api"
    algorithm: str = "HS256"
    access_ttl: timedelta = timedelta(hours=1)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur (string, norme JWT)
    id: int             # identifiant utilisateur
    role: str           # "admin" | "user"
    iat: int
    exp: int


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_access_token(
    *,
    user_id: int,
    role: str,
    settings: JWTSettings,
    now_fn: Optional[Callable[[], datetime]] = None,
) -> str:
    """
    Crée un access token JWT signé embarquant l'id et le rôle.
    """
    now = (now_fn or _now)()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "id": user_id,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + settings.access_ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(
    token: str,
    settings: JWTSettings,
    now_fn: Optional[Callable[[], datetime]] = None,
) -> DecodedToken:
    """
    Décode et valide un token JWT (signature + émetteur + expiration).
    Lève JWTError en cas de signature invalide, de token malformé ou expiré.

    L'expiration est vérifiée contre `now_fn` (horloge injectable) plutôt que
    contre l'horloge système de python-jose.
    """
    decoded = jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        options={"verify_aud": False, "verify_exp": False},
    )
    exp = decoded.get("exp")
    if not isinstance(exp, int):
        raise JWTError("Missing expiration")
    if exp <= int((now_fn or _now)().timestamp()):
        raise JWTError("Signature has expired")
    return decoded  # type: ignore[return-value]
