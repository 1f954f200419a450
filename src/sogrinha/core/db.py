from typing import Any, Self
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pymongo.asynchronous.cursor import AsyncCursor

from sogrinha.errors import ValidationError


class MongoModel(BaseModel):
    id: UUID = Field(alias="_id", serialization_alias="id", default_factory=uuid4)

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        json_schema_serialization_defaults_required=True,
    )

    def to_mongo(self) -> dict[str, Any]:
        """Convert the model to a dictionary for MongoDB storage with _id field."""
        data = self.model_dump()
        if "id" in data:
            data["_id"] = data.pop("id")  # Rename id → _id for MongoDB
        return data

    @classmethod
    async def list_cursor(cls, cursor: AsyncCursor[dict[str, Any]]) -> list[Self]:
        """Iterate over an AsyncCursor and return a list of model instances."""
        return [cls.model_validate(item) async for item in cursor]


def merge_update[M: BaseModel](model: type[M], current: M, update: BaseModel) -> M:
    """Apply the fields explicitly set on ``update`` to ``current`` and re-validate.

    Raises:
        ValidationError: If the merged data is invalid (e.g. a required field set to null)
    """
    merged = {**current.model_dump(include=set(model.model_fields)), **update.model_dump(exclude_unset=True)}
    try:
        return model.model_validate(merged)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid update: {e.errors(include_url=False)}") from e
