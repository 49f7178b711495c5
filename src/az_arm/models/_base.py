from typing import Any

from pydantic import BaseModel


class ArmModel(BaseModel):
    """Base for request bodies; field names are the provider's JSON keys."""

    def to_body(self) -> dict[str, Any]:
        """Return the JSON-ready body, omitting unset (``None``) fields."""
        return self.model_dump(mode="json", exclude_none=True)
