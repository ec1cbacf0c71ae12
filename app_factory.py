# Imports from standard library or third-party packages
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Imports from this project
from config import API_PREFIX, CORS_ORIGINS, LOG_LEVEL
from database import MongoConnection
from exceptions import AuthError
from routers import auth, claims, logs, providers
from utils.responses import error_response, success_response

logger = logging.getLogger(__name__)


def create_app(mongo: Optional[MongoConnection] = None):
    """Crée et configure l'instance de l'application FastAPI."""
    logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

    app = FastAPI(
        title="Claims API",
        description="API de gestion des réclamations de prestations",
        version="1.0.0"
    )
    # La connexion est construite ici puis injectée dans les routes via get_mongo_db
    app.state.mongo = mongo or MongoConnection()

    # Événements de démarrage et d'arrêt
    @app.on_event("startup")
    def on_startup():
        try:
            app.state.mongo.ping()
        except Exception as e:
            logger.error(f"Impossible de se connecter à MongoDB: {e}")
            raise

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.mongo.close()

    # Configuration CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_routing(request: Request, call_next):
        logger.info(f"[{request.method}] request from {request.url.path} path.")
        return await call_next(request)

    # Refus d'authentification / d'autorisation levés par les dépendances
    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return error_response(exc.status_code, exc.message, exc.error)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)

    # Inclusion des routeurs
    app.include_router(auth.router, prefix=f"{API_PREFIX}/auth", tags=["Authentication"])
    app.include_router(claims.router, prefix=f"{API_PREFIX}/claims", tags=["Claims"])
    app.include_router(logs.router, prefix=f"{API_PREFIX}/logs", tags=["Logs"])
    app.include_router(providers.router, prefix=f"{API_PREFIX}/providers", tags=["Providers"])

    @app.get(f"{API_PREFIX}/health", tags=["Health"])
    def health_check():
        return success_response("ok")

    return app
