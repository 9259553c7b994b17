"""
➡️ But : Hacher et vérifier les mots de passe (bcrypt, sel aléatoire par enregistrement).

Le mot de passe en clair n'est jamais stocké ni loggé : seul le hash sort d'ici.
"""

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt ignore (ou refuse, selon la version) tout ce qui dépasse 72 octets
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, *, rounds: int = DEFAULT_ROUNDS) -> str:
    """Retourne le hash bcrypt (sel inclus) du mot de passe."""
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Compare un mot de passe en clair à un hash bcrypt. Ne lève jamais."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # hash illisible ou mot de passe > 72 octets
        return False
