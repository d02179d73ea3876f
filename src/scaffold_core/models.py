# src/scaffold_core/models.py

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Coarse classification used to filter templates."""

    EMAIL_PROVIDER = "email-provider"
    PHONE_PROVIDER = "phone-provider"
    POST_CHANGE_PASSWORD = "post-change-password"
    SEND_PHONE_MESSAGE = "send-phone-message"
    RULE = "rule"
    ACTION = "action"
    BRANDING = "branding"


CATEGORY_TITLES = {
    Category.EMAIL_PROVIDER: "EMAIL PROVIDER ACTIONS",
    Category.PHONE_PROVIDER: "PHONE PROVIDER ACTIONS",
    Category.POST_CHANGE_PASSWORD: "POST CHANGE PASSWORD ACTIONS",
    Category.SEND_PHONE_MESSAGE: "SEND PHONE MESSAGE ACTIONS",
    Category.ACTION: "GENERIC ACTIONS",
    Category.RULE: "RULES",
    Category.BRANDING: "BRANDING",
}


class TemplateMetadata(BaseModel):
    """Annotations parsed from the template body."""
    model_config = ConfigDict(frozen=True)

    overview: Optional[str] = None
    gallery: bool = False
    tags: Tuple[str, ...] = ()
    annotated_title: Optional[str] = None


class Template(BaseModel):
    """A named, immutable unit of scaffold text."""
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(min_length=1)
    category: Category
    title: str
    body: str
    metadata: TemplateMetadata = TemplateMetadata()
    trigger: Optional[str] = None
    language: str = "javascript"
    source: Optional[str] = None  # resource file the body was read from
