"""Cross-reference index over the dressing dataset."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, TypeVar

from dressings.data import load_dataset
from dressings.models import (
    AdditionalDressings,
    Bowl,
    Dataset,
    Dressing,
    DressingOption,
    Salad,
    UsageEntry,
)

_DishT = TypeVar("_DishT", Salad, Bowl)


@dataclass(frozen=True)
class DressingIndex:
    """Lookup tables built once from a Dataset."""

    by_name: dict[str, Dressing]
    by_component: dict[str, list[Dressing]]
    salads_by_dressing: dict[str, list[Salad]]
    bowls_by_dressing: dict[str, list[Bowl]]
    usage: dict[str, UsageEntry]
    used: tuple[Dressing, ...]
    unused: tuple[Dressing, ...]
    options: tuple[DressingOption, ...]

    def find(self, name: str) -> Dressing | None:
        return self.by_name.get(name)

    def usage_for(self, name: str) -> UsageEntry | None:
        return self.usage.get(name)


def display_label(name: str) -> str:
    """Label shown for a dressing in the search list and headings."""
    return f"{name} Dressing"


def _group_by_dressing(dishes: Iterable[_DishT]) -> dict[str, list[_DishT]]:
    grouped: dict[str, list[_DishT]] = {}
    for dish in dishes:
        grouped.setdefault(dish.dressing, []).append(dish)
    return grouped


def _extra_components(dressing: Dressing, composite: Dressing) -> tuple[str, ...]:
    return tuple(
        name
        for name in composite.components
        if name != dressing.name and name not in dressing.components
    )


def _usage_entry(
    dressing: Dressing,
    by_component: dict[str, list[Dressing]],
    salads_by_dressing: dict[str, list[Salad]],
    bowls_by_dressing: dict[str, list[Bowl]],
) -> UsageEntry:
    salads = list(salads_by_dressing.get(dressing.name, []))
    bowls = list(bowls_by_dressing.get(dressing.name, []))
    composites = by_component.get(dressing.name, [])

    # One level only: composites of composites are not followed.
    for composite in composites:
        extra = AdditionalDressings(name=composite.name, components=_extra_components(dressing, composite))
        salads.extend(replace(salad, additional_dressings=extra) for salad in salads_by_dressing.get(composite.name, []))
        bowls.extend(replace(bowl, additional_dressings=extra) for bowl in bowls_by_dressing.get(composite.name, []))

    return UsageEntry(salads=tuple(salads), bowls=tuple(bowls), dressings=tuple(composites))


def partition_usage(
    dressings: Iterable[Dressing],
    by_component: dict[str, list[Dressing]],
    salads_by_dressing: dict[str, list[Salad]],
    bowls_by_dressing: dict[str, list[Bowl]],
) -> tuple[list[Dressing], list[Dressing]]:
    """Split dressings into (used, unused), keeping dataset order."""
    used: list[Dressing] = []
    unused: list[Dressing] = []
    for dressing in dressings:
        is_used = (
            bool(salads_by_dressing.get(dressing.name))
            or bool(bowls_by_dressing.get(dressing.name))
            or bool(by_component.get(dressing.name))
        )
        (used if is_used else unused).append(dressing)
    return used, unused


def build_index(dataset: Dataset) -> DressingIndex:
    """Build every lookup table for the dataset in one pass per table."""
    by_name = {dressing.name: dressing for dressing in dataset.dressings}

    by_component: dict[str, list[Dressing]] = {}
    for dressing in dataset.dressings:
        for component in dressing.components:
            by_component.setdefault(component, []).append(dressing)

    salads_by_dressing = _group_by_dressing(dataset.salads)
    bowls_by_dressing = _group_by_dressing(dataset.bowls)

    usage = {
        dressing.name: _usage_entry(dressing, by_component, salads_by_dressing, bowls_by_dressing)
        for dressing in dataset.dressings
    }

    used, unused = partition_usage(dataset.dressings, by_component, salads_by_dressing, bowls_by_dressing)
    options = tuple(DressingOption(value=d.name, label=display_label(d.name)) for d in used)

    return DressingIndex(
        by_name=by_name,
        by_component=by_component,
        salads_by_dressing=salads_by_dressing,
        bowls_by_dressing=bowls_by_dressing,
        usage=usage,
        used=tuple(used),
        unused=tuple(unused),
        options=options,
    )


def filter_options(options: Iterable[DressingOption], query: str) -> list[DressingOption]:
    """Case-insensitive substring match on the dressing name."""
    q = query.strip().lower()
    if not q:
        return list(options)
    return [option for option in options if q in option.value.lower()]


_INDEX: DressingIndex | None = None


def initialize() -> DressingIndex:
    """Build the process-wide index from the configured dataset on first call."""
    global _INDEX
    if _INDEX is None:
        _INDEX = build_index(load_dataset())
    return _INDEX
