# src/scaffold_core/annotations.py
"""
Parsing of JSDoc-style annotations embedded in template bodies.

Rule snippets published to the gallery carry a leading doc block such as::

    /**
     * @title Email domain allow list
     * @overview Only allow access to users with specific allow list email domains.
     * @gallery true
     * @category access control
     */

Only the first doc block of a body is inspected. Tags this module does not
know about (``@param``, ``@returns`` ...) are left alone.
"""

import logging
import re
from typing import Dict, List, Optional

from .errors import MalformedTemplateError
from .models import TemplateMetadata

logger = logging.getLogger(__name__)

_DOC_BLOCK = re.compile(r"^\s*/\*\*(?P<content>.*?)\*/", re.DOTALL)
_TAG_LINE = re.compile(r"^@(?P<tag>[A-Za-z]+)(?:\s+(?P<value>.*))?$")

SINGLE_VALUED = ("title", "overview", "gallery")
MULTI_VALUED = ("category", "tag")

_BOOLEANS = {"true": True, "false": False}


def _doc_lines(body: str) -> List[str]:
    """Return the lines of the leading doc block with the ``*`` gutter removed."""
    match = _DOC_BLOCK.match(body)
    if not match:
        return []

    lines = []
    for raw in match.group("content").splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        lines.append(line)
    return lines


def parse_annotations(body: str, identifier: Optional[str] = None) -> TemplateMetadata:
    """
    Build a TemplateMetadata record from the annotations in ``body``.

    Raises:
        MalformedTemplateError: a known tag has an empty or invalid value, or a
            single-valued tag appears more than once.
    """
    single: Dict[str, str] = {}
    tags: List[str] = []

    for line in _doc_lines(body):
        match = _TAG_LINE.match(line)
        if not match:
            continue

        tag = match.group("tag").lower()
        value = (match.group("value") or "").strip()

        if tag not in SINGLE_VALUED and tag not in MULTI_VALUED:
            continue

        if not value:
            raise MalformedTemplateError(
                f"Annotation '@{tag}' has no value", identifier=identifier
            )

        if tag in MULTI_VALUED:
            if value not in tags:
                tags.append(value)
            continue

        if tag in single:
            raise MalformedTemplateError(
                f"Annotation '@{tag}' appears more than once", identifier=identifier
            )
        single[tag] = value

    gallery = False
    if "gallery" in single:
        try:
            gallery = _BOOLEANS[single["gallery"].lower()]
        except KeyError as exc:
            raise MalformedTemplateError(
                f"Annotation '@gallery' must be 'true' or 'false', got '{single['gallery']}'",
                identifier=identifier,
            ) from exc

    metadata = TemplateMetadata(
        overview=single.get("overview"),
        gallery=gallery,
        tags=tuple(tags),
        annotated_title=single.get("title"),
    )
    if single or tags:
        logger.debug(f"Parsed annotations for '{identifier}': {metadata}")
    return metadata
