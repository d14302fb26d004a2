"""Transient user notification models."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    """Kind of notification shown to the user."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notification(BaseModel):
    """A short message presented to the user once."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    sequence_number: int = Field(ge=0, description="Order of notifications")
    timestamp: datetime = Field(default_factory=datetime.now, description="When it was raised")
    kind: NotificationKind = Field(default=NotificationKind.INFO, description="Notification kind")
    content: str = Field(description="Text shown to the user")
