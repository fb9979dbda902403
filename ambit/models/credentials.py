"""
Credential Models

On-disk schema of the persisted Tailscale API key.
"""

from pydantic import BaseModel, Field, StrictStr


class StoredCredentials(BaseModel):
    """Document stored at <config_dir>/credentials.json."""

    api_key: StrictStr = Field(alias="apiKey")

    @classmethod
    def for_key(cls, key: str) -> "StoredCredentials":
        return cls.model_validate({"apiKey": key})

    def to_document(self) -> dict:
        """Serialize with the on-disk key names."""
        return self.model_dump(by_alias=True)
