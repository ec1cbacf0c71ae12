from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection

from models import MongoModel

ModelT = TypeVar("ModelT", bound=MongoModel)


def to_object_id(document_id: str) -> Optional[ObjectId]:
    """Retourne l'ObjectId correspondant, ou None si la chaîne n'est pas un ObjectId valide."""
    if isinstance(document_id, ObjectId):
        return document_id
    if not document_id or not ObjectId.is_valid(document_id):
        return None
    return ObjectId(document_id)


class DocumentCollection(Generic[ModelT]):
    """
    Accès typé à une collection MongoDB.

    Chaque opération est un appel unique au serveur ; les documents sont convertis
    dans le modèle pydantic associé à la collection.
    """

    def __init__(self, collection: Collection, model: Type[ModelT]):
        self.collection = collection
        self.model = model

    def find_by_id(self, document_id: str) -> Optional[ModelT]:
        object_id = to_object_id(document_id)
        if object_id is None:
            return None
        return self.model.from_mongo(self.collection.find_one({"_id": object_id}))

    def find_one(self, query: Mapping[str, Any]) -> Optional[ModelT]:
        return self.model.from_mongo(self.collection.find_one(query))

    def find(self, query: Mapping[str, Any]) -> List[ModelT]:
        return [self.model.from_mongo(document) for document in self.collection.find(query)]

    def count(self, query: Mapping[str, Any]) -> int:
        return self.collection.count_documents(query)

    def insert(self, item: ModelT) -> ModelT:
        result = self.collection.insert_one(item.to_mongo())
        return item.model_copy(update={"id": str(result.inserted_id)})

    def update(self, document_id: str, update: Mapping[str, Any]) -> Optional[ModelT]:
        """Applique l'opérateur de mise à jour et retourne le document modifié."""
        object_id = to_object_id(document_id)
        if object_id is None:
            return None
        document = self.collection.find_one_and_update(
            {"_id": object_id},
            update,
            return_document=ReturnDocument.AFTER,
        )
        return self.model.from_mongo(document)

    def set_fields(self, document_id: str, fields: Mapping[str, Any]) -> Optional[ModelT]:
        return self.update(document_id, {"$set": dict(fields)})
