# src/scaffold_core/config.py

from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import MalformedTemplateError
from .models import Category


class TemplateEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    identifier: str
    category: Category
    title: str
    path: str  # resource file, relative to the manifest (or definitions/) directory
    trigger: Optional[str] = None
    language: str = "javascript"

    @field_validator('identifier')
    def validate_identifier(cls, v):
        if not v or v != v.strip():
            raise ValueError("identifier must be non-empty and have no surrounding whitespace")
        return v

    @field_validator('path')
    def validate_path(cls, v):
        if not v.strip():
            raise ValueError("path must not be empty")
        return v


class CatalogManifest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    templates: List[TemplateEntry]
    base_dir: Optional[Path] = None  # filled in by load_manifest

    @model_validator(mode='after')
    def validate_unique_identifiers(self):
        """Every identifier may appear only once."""
        seen = set()
        for entry in self.templates:
            if entry.identifier in seen:
                raise ValueError(f"duplicate template identifier '{entry.identifier}'")
            seen.add(entry.identifier)
        return self

    def resolve(self, entry: TemplateEntry) -> Path:
        """Absolute location of an entry's resource file."""
        path = Path(entry.path)
        if path.is_absolute() or self.base_dir is None:
            return path
        return self.base_dir / path


def load_manifest(filepath) -> CatalogManifest:
    """Load and validate a catalog manifest from a YAML file."""
    import yaml

    filepath = Path(filepath)
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            manifest_dict = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise MalformedTemplateError(f"Manifest not found: {filepath}", source=str(filepath)) from exc
    except OSError as exc:
        raise MalformedTemplateError(f"Cannot read manifest {filepath}: {exc}", source=str(filepath)) from exc
    except yaml.YAMLError as exc:
        raise MalformedTemplateError(f"Manifest is not valid YAML: {exc}", source=str(filepath)) from exc

    if not isinstance(manifest_dict, dict):
        raise MalformedTemplateError(
            "Manifest must be a mapping with a 'templates' list", source=str(filepath)
        )

    try:
        manifest = CatalogManifest.model_validate(manifest_dict)
    except ValidationError as exc:
        raise MalformedTemplateError(f"Invalid manifest {filepath}: {exc}", source=str(filepath)) from exc

    manifest.base_dir = filepath.resolve().parent
    return manifest
