# src/scaffold_core/display.py

from typing import Iterable, List
from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .models import CATEGORY_TITLES, Category, Template


def templates_table(templates: Iterable[Template]) -> Group:
    """One table per category, templates sorted by identifier."""
    by_category: dict[Category, list[Template]] = {}
    for template in templates:
        by_category.setdefault(template.category, []).append(template)

    tables: List[Table] = []
    for category, category_title in CATEGORY_TITLES.items():
        rows = by_category.get(category, [])
        if not rows:
            continue
        table = Table(show_header=True, header_style="bold")
        table.title = category_title
        table.add_column("Template", style="cyan", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Trigger", style="dim")
        for template in sorted(rows, key=lambda t: t.identifier):
            table.add_row(template.identifier, template.title, template.trigger or "-")
        tables.append(table)

    return Group(*tables)


def template_panel(template: Template) -> Panel:
    """Metadata summary followed by the highlighted body."""
    details = Text()
    details.append("Category: ", style="bold")
    details.append(f"{template.category.value}\n")
    if template.trigger:
        details.append("Trigger: ", style="bold")
        details.append(f"{template.trigger}\n")
    if template.metadata.overview:
        details.append("Overview: ", style="bold")
        details.append(f"{template.metadata.overview}\n")
    if template.metadata.tags:
        details.append("Tags: ", style="bold")
        details.append(", ".join(template.metadata.tags) + "\n")
    if template.metadata.gallery:
        details.append("Published in gallery\n", style="green")

    body = Syntax(template.body, template.language, line_numbers=False)
    return Panel(
        Group(details, body),
        title=f"[bold]{template.title}[/bold] ({template.identifier})",
        border_style="cyan",
    )
