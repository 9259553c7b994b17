"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec une description
des conventions de l'API (auth Bearer, format des erreurs, camelCase).
"""

from fastapi.openapi.utils import get_openapi


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de location de voitures (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Routes protégées : header `Authorization: Bearer <token>` (token valable 1h).\n"
            "- Erreurs : corps JSON `{\"message\": ...}`.\n"
            "- Champs JSON en camelCase, dates au format ISO 8601, heures en UTC.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
