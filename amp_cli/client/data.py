"""
Response Models.

Typed results of remote operations. Decoding accepts both the lowercase
JSON keys and the capitalised field names; unknown keys are ignored.
The id must be a JSON integer: booleans, floats and numeric strings are
rejected.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt


class AmpStatus(BaseModel):
    """Status of a monitored AMP service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(validation_alias=AliasChoices("name", "Name"))
    id: StrictInt = Field(validation_alias=AliasChoices("id", "Id"))
    status: str = Field(validation_alias=AliasChoices("status", "Status"))
