import argparse

from dotenv import load_dotenv
from pymongo.errors import ConnectionFailure

load_dotenv()

from database import MongoConnection
from models import Provider, ProviderStatus
from repositories import ProviderRepository


def create_provider(name: str, email: str, address: str, connection: MongoConnection = None) -> Provider:
    """
    Enregistre un fournisseur actif et le retourne avec son id.
    Aucune route HTTP ne crée de fournisseur : ce script sert à initialiser la base.
    """
    connection = connection or MongoConnection()
    providers = ProviderRepository(connection.get_db())
    return providers.create(Provider(name=name, email=email, address=address, status=ProviderStatus.active))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Crée un fournisseur actif dans MongoDB.")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--address", default="")
    args = parser.parse_args(argv)

    connection = MongoConnection()
    try:
        connection.ping()
        provider = create_provider(args.name, args.email, args.address, connection)
        print(f"Fournisseur '{provider.name}' créé avec l'id {provider.id}")
    except ConnectionFailure as e:
        print(f"Erreur de connexion à MongoDB : {e}")
        return 1
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
