"""
Bundled template resources for Scaffold Core.

Provides:
- TEMPLATE_REGISTRY: entries for the built-in templates
- DEFINITIONS_DIR: directory holding the template bodies
- builtin_manifest: the registry as a CatalogManifest
"""

from .registry import DEFINITIONS_DIR, EMPTY_ACTION, TEMPLATE_REGISTRY, builtin_manifest

__all__ = [
    "DEFINITIONS_DIR",
    "EMPTY_ACTION",
    "TEMPLATE_REGISTRY",
    "builtin_manifest",
]
