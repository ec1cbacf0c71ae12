from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modèle de base : attributs en snake_case, champs JSON/MongoDB en camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class MongoModel(CamelModel):
    """Document MongoDB. L'ObjectId `_id` est exposé sous forme de chaîne `id`."""

    id: Optional[str] = None

    @classmethod
    def from_mongo(cls, document: Optional[Mapping[str, Any]]):
        if document is None:
            return None
        data = dict(document)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        return cls.model_validate(data)

    def to_mongo(self) -> dict:
        return self.model_dump(by_alias=True, exclude={"id"})
