from __future__ import annotations
from pathlib import Path
from typing import Tuple

from ..config import CatalogManifest, TemplateEntry
from ..models import Category

BASE_DIR = Path(__file__).resolve().parent
DEFINITIONS_DIR = BASE_DIR / "definitions"

TEMPLATE_REGISTRY: Tuple[TemplateEntry, ...] = (
    # Actions
    TemplateEntry(
        identifier="custom-email-provider",
        category=Category.EMAIL_PROVIDER,
        title="Custom email provider",
        path="action-template-custom-email-provider.js",
        trigger="custom-email-provider",
    ),
    TemplateEntry(
        identifier="custom-phone-provider",
        category=Category.PHONE_PROVIDER,
        title="Custom phone provider",
        path="action-template-custom-phone-provider.js",
        trigger="custom-phone-provider",
    ),
    TemplateEntry(
        identifier="post-change-password",
        category=Category.POST_CHANGE_PASSWORD,
        title="Post change password",
        path="action-template-post-change-password.js",
        trigger="post-change-password",
    ),
    TemplateEntry(
        identifier="send-phone-message",
        category=Category.SEND_PHONE_MESSAGE,
        title="Send phone message",
        path="action-template-send-phone-message.js",
        trigger="send-phone-message",
    ),
    TemplateEntry(
        identifier="empty-action",
        category=Category.ACTION,
        title="Empty action",
        path="action-template-empty.js",
    ),
    # Rules, in picker order
    TemplateEntry(
        identifier="empty-rule",
        category=Category.RULE,
        title="Empty rule",
        path="rule-template-empty-rule.js",
    ),
    TemplateEntry(
        identifier="add-email-to-access-token",
        category=Category.RULE,
        title="Add email to access token",
        path="rule-template-add-email-to-access-token.js",
    ),
    TemplateEntry(
        identifier="check-last-password-reset",
        category=Category.RULE,
        title="Check last password reset",
        path="rule-template-check-last-password-reset.js",
    ),
    TemplateEntry(
        identifier="simple-domain-allow-list",
        category=Category.RULE,
        title="Simple domain allow list",
        path="rule-template-simple-domain-allow-list.js",
    ),
    TemplateEntry(
        identifier="ip-allow-list",
        category=Category.RULE,
        title="IP address allow list",
        path="rule-template-ip-address-allow-list.js",
    ),
    TemplateEntry(
        identifier="ip-deny-list",
        category=Category.RULE,
        title="IP address deny list",
        path="rule-template-ip-address-deny-list.js",
    ),
    # Branding
    TemplateEntry(
        identifier="branding-customization-notification",
        category=Category.BRANDING,
        title="Branding customization notification",
        path="branding/branding-customization-notification.js",
    ),
)

# Used when an action trigger has no dedicated template
EMPTY_ACTION = "empty-action"


def builtin_manifest() -> CatalogManifest:
    """Manifest describing the bundled templates."""
    return CatalogManifest(templates=list(TEMPLATE_REGISTRY), base_dir=DEFINITIONS_DIR)
