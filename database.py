# Base de données: connexion MongoDB partagée par toutes les requêtes.

import logging
import threading
from typing import Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from config import MONGODB_URI, DATABASE_NAME

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Poignée vers la base MongoDB, construite une fois au démarrage puis injectée.

    La connexion est paresseuse : le client n'est créé qu'au premier appel à connect(),
    et un verrou empêche deux connexions concurrentes.
    """

    def __init__(self, uri: str = MONGODB_URI, db_name: str = DATABASE_NAME, client: Optional[MongoClient] = None):
        self._uri = uri
        self._db_name = db_name
        self._client = client
        self._db: Optional[Database] = None
        self._lock = threading.Lock()

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    def connect(self) -> Database:
        if self._db is not None:
            return self._db
        with self._lock:
            if self._db is None:
                if self._client is None:
                    self._client = MongoClient(self._uri)
                self._db = self._client[self._db_name]
                logger.info(f"Connexion à MongoDB établie (base: {self._db_name})")
        return self._db

    def get_db(self) -> Database:
        return self.connect()

    def ping(self) -> None:
        """Vérifie que le serveur répond. Lève une exception pymongo sinon."""
        self.connect().client.admin.command("ping")

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                logger.info("Connexion à MongoDB fermée")
            self._client = None
            self._db = None


# Dépendance FastAPI pour obtenir la base MongoDB attachée à l'application
def get_mongo_db(request: Request) -> Database:
    """
    Retourne l'instance de la base de données MongoDB de l'application.
    """
    return request.app.state.mongo.get_db()
