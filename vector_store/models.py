"""
Data Models for the Vector Store

Defines:
1. StoredItem - One ingested chunk with its embedding
2. VectorStoreDocument - The versioned document persisted under one store key
3. IngestResult - Counts from one ingestion call

Design Principles:
- Pydantic v2 for validation, consistent with the retrieval and generation models
- camelCase aliases on the wire so stores written by other clients load unchanged
- A document that fails validation is reported as InvalidFormat, never repaired
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from common.exceptions import InvalidFormat


STORE_FORMAT_VERSION = 1


class StoredItem(BaseModel):
    """A single chunk as persisted in the vector store."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Opaque unique identifier assigned at ingestion",
    )
    text: str = Field(
        ...,
        min_length=1,
        description="Trimmed chunk content",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Caller-supplied metadata, returned unchanged on retrieval",
    )
    embedding: list[float] = Field(
        ...,
        description="Embedding vector; length equals the store dimension",
    )
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="ISO-8601 ingestion timestamp (UTC)",
    )
    content_hash: str = Field(
        ...,
        alias="contentHash",
        description="Digest of (text, metadata) used for deduplication",
    )


class VectorStoreDocument(BaseModel):
    """
    The whole vector store as one JSON document.

    ``dimension == 0`` means no item has been stored yet; the first
    embedding defines it.
    """
    version: Literal[1] = STORE_FORMAT_VERSION
    dimension: int = Field(0, ge=0)
    items: list[StoredItem] = Field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(self.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2)

    @classmethod
    def from_json(cls, raw: str, key: str = "") -> "VectorStoreDocument":
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidFormat(key, f"not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise InvalidFormat(key, "top-level value is not an object")
        version = payload.get("version")
        if isinstance(version, bool) or version != STORE_FORMAT_VERSION:
            raise InvalidFormat(key, f"unsupported version: {version!r}")
        if not isinstance(payload.get("items"), list):
            raise InvalidFormat(key, "items is not a list")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidFormat(key, str(exc)) from exc


class IngestResult(BaseModel):
    """Counts from one ingestion call."""
    added: int = Field(0, ge=0, description="Chunks embedded and appended")
    skipped: int = Field(0, ge=0, description="Chunks already present (same text and metadata)")
