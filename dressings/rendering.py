"""Rendering helpers for search results and the dressing detail page."""

from __future__ import annotations

from typing import Mapping

from rich.text import Text

from dressings.index import display_label
from dressings.models import AdditionalDressings, Dish, Dressing, UsageEntry

LINK_STYLE = "underline #5fa8ff"
FOCUSED_LINK_STYLE = "bold reverse #5fa8ff"
NOTE_STYLE = "italic"
SECTION_STYLE = "bold underline"
TITLE_STYLE = "bold"


def page_suffix(page: int | None) -> str:
    return f" (page {page})" if page is not None else ""


def format_recipe_title(name: str, page: int | None) -> Text:
    """Render ``Name (page N)``; the page part is dropped when unknown."""
    return Text(f"{name}{page_suffix(page)}")


class _DetailBuilder:
    """Accumulates detail text and the dressing names reachable as links."""

    def __init__(self, cursor: int | None) -> None:
        self.text = Text()
        self.links: list[str] = []
        self.cursor = cursor

    def link(self, name: str) -> None:
        focused = self.cursor is not None and len(self.links) == self.cursor
        self.text.append(name, style=FOCUSED_LINK_STYLE if focused else LINK_STYLE)
        self.links.append(name)

    def section(self, title: str) -> None:
        self.text.append("\n\n")
        self.text.append(title, style=SECTION_STYLE)

    def additional_note(self, extra: AdditionalDressings, by_name: Mapping[str, Dressing]) -> None:
        self.text.append("\n    ")
        self.text.append("Requires additional dressings", style=NOTE_STYLE)
        if extra.components:
            self.text.append(" (", style=NOTE_STYLE)
            for idx, name in enumerate(extra.components):
                if idx > 0:
                    self.text.append(", ", style=NOTE_STYLE)
                self.link(name)
            self.text.append(")", style=NOTE_STYLE)
        self.text.append(". See ", style=NOTE_STYLE)
        self.link(extra.name)
        parent = by_name.get(extra.name)
        if parent is not None and parent.page is not None:
            self.text.append(f", page {parent.page}", style=NOTE_STYLE)
        self.text.append(".", style=NOTE_STYLE)

    def dishes(self, title: str, dishes: tuple[Dish, ...], by_name: Mapping[str, Dressing]) -> None:
        if not dishes:
            return
        self.section(title)
        for dish in dishes:
            self.text.append("\n  ")
            self.text.append_text(format_recipe_title(dish.name, dish.page))
            if dish.additional_dressings is not None:
                self.additional_note(dish.additional_dressings, by_name)


def build_detail(
    dressing: Dressing,
    entry: UsageEntry,
    by_name: Mapping[str, Dressing],
    cursor: int | None = None,
) -> tuple[Text, list[str]]:
    """Render a dressing's page and return it with its links in display order."""
    builder = _DetailBuilder(cursor)
    builder.text.append(display_label(dressing.name), style=TITLE_STYLE)
    if dressing.page is not None:
        builder.text.append(f"\nRecipe on page {dressing.page}", style="dim")

    builder.dishes("Salads", entry.salads, by_name)
    builder.dishes("Bowls", entry.bowls, by_name)

    if entry.dressings:
        builder.section("Dressings")
        for composite in entry.dressings:
            builder.text.append("\n  ")
            builder.link(composite.name)
            builder.text.append(page_suffix(composite.page))

    if not (entry.salads or entry.bowls or entry.dressings):
        builder.text.append("\n\n")
        builder.text.append("Not used by any salad, bowl or dressing.", style="dim")

    return builder.text, builder.links
