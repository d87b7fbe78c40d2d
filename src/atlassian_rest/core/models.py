"""Shared data models: the response envelope and the base for API schemes."""

import json
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ResponseScheme(BaseModel):
    """Raw outcome of one HTTP call.

    Returned next to every decoded result and attached to errors raised
    after the request went out.
    """

    code: int = Field(default=0, description="HTTP status code")
    endpoint: str = Field(default="", description="Absolute URL that was called")
    method: str = Field(default="", description="HTTP method")
    body: bytes = Field(default=b"", description="Raw response body")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")

    @property
    def ok(self) -> bool:
        """Whether the status code is 2xx."""
        return 200 <= self.code < 300

    def json(self) -> Any:  # type: ignore[override]
        """Parse the raw body as JSON.

        Returns:
            Decoded JSON value, or None for an empty body
        """
        if not self.body:
            return None
        return json.loads(self.body)


class AtlassianModel(BaseModel):
    """Base for every payload and result scheme.

    Fields are declared in snake_case and exchanged in camelCase. Unknown
    fields returned by the API are kept.
    """

    class Config:
        """Pydantic configuration."""

        extra = "allow"
        populate_by_name = True
        alias_generator = to_camel

    def to_payload(self) -> dict[str, Any]:
        """Serialize the model into its JSON wire form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
