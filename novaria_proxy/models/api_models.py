import base64
import binascii

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class ConversationTurnPy(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = ""
    model_config = {"populate_by_name": True}


class AttachmentPy(BaseModel):
    mime_type: str = Field(alias="mimeType")
    data: str  # base64 encoded file bytes
    model_config = {"populate_by_name": True}

    @field_validator("data")
    @classmethod
    def _strict_base64(cls, value: str) -> str:
        # Data URLs and other non-alphabet input must not be silently stripped
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"attachment data is not valid base64: {e}") from e
        return value


class GenerateRequestModel(BaseModel):
    user_message: Optional[str] = Field(None, alias="userMessage")
    conversation_history: List[ConversationTurnPy] = Field(default_factory=list, alias="conversationHistory")
    attached_files: List[AttachmentPy] = Field(default_factory=list, alias="attachedFiles")
    selected_model: Optional[str] = Field(None, alias="selectedModel")
    model_config = {"populate_by_name": True}

    @field_validator("conversation_history", "attached_files", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    def has_content(self) -> bool:
        return bool(self.user_message) or len(self.attached_files) > 0


class GenerateResponseModel(BaseModel):
    text: str
    # Image generation is not wired up; always null
    image_url: Optional[str] = Field(None, alias="imageUrl")
    model_used: Optional[str] = Field(None, alias="modelUsed")
    model_config = {"populate_by_name": True}


class ErrorResponseModel(BaseModel):
    message: str


class ModelInfoPy(BaseModel):
    key: str
    upstream_model: str = Field(alias="upstreamModel")
    supports_attachments: bool = Field(alias="supportsAttachments")
    model_config = {"populate_by_name": True}


class ModelListResponseModel(BaseModel):
    models: List[ModelInfoPy]
    default: str
