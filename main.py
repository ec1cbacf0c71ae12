# main.py: Point d'entrée pour le serveur uvicorn.
# Ce fichier importe l'application créée par l'app factory.

from dotenv import load_dotenv

# Charger les variables d'environnement au tout début
load_dotenv()

import uvicorn

from app_factory import create_app  # qui se trouve dans app_factory.py
from config import HOST, PORT

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
