"""Scaffold Core - read-only catalog of project scaffold templates."""

from .catalog import CategoryView, TemplateCatalog
from .errors import CatalogError, MalformedTemplateError, NotFoundError
from .models import Category, Template, TemplateMetadata

__version__ = "0.1.0"

__all__ = [
    "CatalogError",
    "Category",
    "CategoryView",
    "MalformedTemplateError",
    "NotFoundError",
    "Template",
    "TemplateCatalog",
    "TemplateMetadata",
]
