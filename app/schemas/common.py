from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case fields on the Python side, camelCase on the wire."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}
