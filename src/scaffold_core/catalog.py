# src/scaffold_core/catalog.py
"""Read-only template catalog."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple, Union
from pydantic import ValidationError

from .annotations import parse_annotations
from .config import CatalogManifest, TemplateEntry, load_manifest
from .errors import MalformedTemplateError, NotFoundError
from .models import Category, Template
from .templates.registry import EMPTY_ACTION, builtin_manifest

logger = logging.getLogger(__name__)


def _coerce_category(category: Union[Category, str]) -> Category:
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError as exc:
        raise NotFoundError(
            f"Category '{category}' not found",
            available=[c.value for c in Category],
            category=category,
        ) from exc


def load_template(entry: TemplateEntry, path: Path) -> Template:
    """
    Read one resource file and build its Template.

    The body is decoded from the raw bytes so line endings survive untouched.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise MalformedTemplateError(
            f"Cannot read template '{entry.identifier}' from {path}: {exc}",
            identifier=entry.identifier,
            source=str(path),
        ) from exc

    try:
        body = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedTemplateError(
            f"Template '{entry.identifier}' is not valid UTF-8",
            identifier=entry.identifier,
            source=str(path),
        ) from exc

    if not body.strip():
        raise MalformedTemplateError(
            f"Template '{entry.identifier}' is empty",
            identifier=entry.identifier,
            source=str(path),
        )

    metadata = parse_annotations(body, identifier=entry.identifier)

    try:
        template = Template(
            identifier=entry.identifier,
            category=entry.category,
            title=entry.title,
            body=body,
            metadata=metadata,
            trigger=entry.trigger,
            language=entry.language,
            source=entry.path,
        )
    except ValidationError as exc:
        raise MalformedTemplateError(
            f"Invalid template '{entry.identifier}': {exc}",
            identifier=entry.identifier,
            source=str(path),
        ) from exc

    logger.debug(f"Loaded template '{template.identifier}' ({len(raw)} bytes) from {path}")
    return template


class CategoryView:
    """Restartable view over the templates of one category."""

    def __init__(self, templates: Tuple[Template, ...], category: Category):
        self._templates = templates
        self.category = category

    def __iter__(self) -> Iterator[Template]:
        return (t for t in self._templates if t.category == self.category)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"CategoryView(category={self.category.value!r}, size={len(self)})"


class TemplateCatalog:
    """
    Immutable collection of templates indexed by identifier.

    Build one with ``TemplateCatalog.builtin()`` or ``TemplateCatalog.from_manifest(path)``
    and pass it to whatever needs templates.
    """

    def __init__(self, templates: Iterable[Template], fallback_action: str = EMPTY_ACTION):
        by_id = {}
        load_order = []
        for template in templates:
            if template.identifier in by_id:
                raise MalformedTemplateError(
                    f"Duplicate template identifier '{template.identifier}'",
                    identifier=template.identifier,
                    source=template.source,
                )
            by_id[template.identifier] = template
            load_order.append(template.identifier)

        self._by_id = MappingProxyType({k: by_id[k] for k in sorted(by_id)})
        self._sorted: Tuple[Template, ...] = tuple(self._by_id.values())
        self._load_order: Tuple[str, ...] = tuple(load_order)
        self.fallback_action = fallback_action

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_catalog_manifest(cls, manifest: CatalogManifest, **kwargs) -> "TemplateCatalog":
        templates = [load_template(entry, manifest.resolve(entry)) for entry in manifest.templates]
        catalog = cls(templates, **kwargs)
        logger.info(f"Template catalog loaded with {len(catalog)} templates")
        return catalog

    @classmethod
    def from_manifest(cls, filepath, **kwargs) -> "TemplateCatalog":
        """Load the templates listed in a YAML manifest."""
        return cls.from_catalog_manifest(load_manifest(filepath), **kwargs)

    @classmethod
    def builtin(cls) -> "TemplateCatalog":
        """Load the templates bundled with the package."""
        return cls.from_catalog_manifest(builtin_manifest())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get(self, identifier: str) -> Template:
        try:
            return self._by_id[identifier]
        except (KeyError, TypeError) as exc:
            raise NotFoundError(
                f"Template '{identifier}' not found",
                available=self._by_id.keys(),
                identifier=identifier,
            ) from exc

    def list(self) -> List[Template]:
        """All templates, sorted by identifier."""
        return list(self._sorted)

    def list_by_category(self, category: Union[Category, str]) -> CategoryView:
        return CategoryView(self._sorted, _coerce_category(category))

    def identifiers(self) -> List[str]:
        return list(self._by_id.keys())

    def categories(self) -> List[Category]:
        """Categories that have at least one template, in declaration order."""
        present = {t.category for t in self._sorted}
        return [c for c in Category if c in present]

    def for_trigger(self, trigger: str) -> Template:
        """
        Template to scaffold an action for ``trigger``.

        Triggers without a dedicated template get the generic empty action.
        """
        for template in self._sorted:
            if template.trigger == trigger:
                return template
        logger.debug(f"No template for trigger '{trigger}', using '{self.fallback_action}'")
        return self.get(self.fallback_action)

    def find(self, query: str) -> List[Template]:
        """Templates whose identifier, title or tags contain ``query`` (case-insensitive)."""
        needle = query.lower()
        matches = []
        for template in self._sorted:
            haystack = [template.identifier, template.title, *template.metadata.tags]
            if any(needle in value.lower() for value in haystack):
                matches.append(template)
        return matches

    def titles(self, category: Optional[Union[Category, str]] = None) -> List[Tuple[str, str]]:
        """``(title, identifier)`` pairs in load order, for pickers."""
        wanted = _coerce_category(category) if category is not None else None
        pairs = []
        for identifier in self._load_order:
            template = self._by_id[identifier]
            if wanted is None or template.category == wanted:
                pairs.append((template.title, identifier))
        return pairs

    def get_by_title(self, title: str) -> Template:
        for template_title, identifier in self.titles():
            if template_title == title:
                return self._by_id[identifier]
        raise NotFoundError(
            f"No template titled '{title}'",
            available=[t.title for t in self._sorted],
            title=title,
        )

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __iter__(self) -> Iterator[Template]:
        return iter(self._sorted)

    def __repr__(self) -> str:
        return f"TemplateCatalog(size={len(self)})"
