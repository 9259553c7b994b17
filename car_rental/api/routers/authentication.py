from fastapi import APIRouter, Depends, status

from car_rental.api.dependencies import (
    get_credential_store,
    get_current_identity,
    get_token_service,
)
from car_rental.core.schemas import MessageOut
from car_rental.features.authentication.schemas import (
    LoginIn,
    LoginOut,
    SettingsIn,
    SettingsOut,
    SignUpIn,
    UserOut,
)
from car_rental.features.authentication.services import CredentialStore, Identity, TokenService

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)

# -----------------------------
# Sign-up
# -----------------------------
@router.post(
    "/signup",
    summary="Créer un compte",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageOut,
    responses={400: {"description": "Champs manquants ou username déjà pris"}},
)
def signup(payload: SignUpIn, store: CredentialStore = Depends(get_credential_store)):
    store.register(payload.username, payload.password, payload.role)
    return MessageOut(message="User registered")

# -----------------------------
# Login
# -----------------------------
@router.post(
    "/login",
    summary="Se connecter",
    description="Retourne un access token (Bearer, 1h) et l'utilisateur.",
    response_model=LoginOut,
    responses={401: {"description": "Invalid credentials"}},
)
def login(
    payload: LoginIn,
    store: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
):
    user = store.verify(payload.username, payload.password)
    return LoginOut(
        token=tokens.issue(user),
        user=UserOut(username=user.username, role=user.role),
    )

# -----------------------------
# Settings (rotation du mot de passe)
# -----------------------------
@router.put(
    "/settings",
    summary="Mettre à jour son profil",
    response_model=SettingsOut,
    responses={
        401: {"description": "Token invalide ou expiré"},
        404: {"description": "Utilisateur introuvable"},
    },
)
def update_settings(
    payload: SettingsIn,
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    user = store.rotate_secret(identity.id, payload.password)
    return SettingsOut(
        message="Settings updated.",
        user=UserOut(username=user.username, role=user.role),
    )
