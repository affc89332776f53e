"""
Shared model base.
Stored and transmitted JSON uses camelCase keys (firmName, createdAt, ...);
Python code uses snake_case attributes. Both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """JSON-compatible dict in the wire (camelCase) format."""
        return self.model_dump(mode="json", by_alias=True)
