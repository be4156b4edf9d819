"""Domain models for the dressing finder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dressing:
    """A named dressing recipe, optionally built from other dressings."""

    name: str
    page: int | None = None
    components: tuple[str, ...] = ()


@dataclass(frozen=True)
class AdditionalDressings:
    """The composite dressing a dish really needs and its remaining ingredients."""

    name: str
    components: tuple[str, ...] = ()


@dataclass(frozen=True)
class Salad:
    name: str
    dressing: str
    page: int | None = None
    additional_dressings: AdditionalDressings | None = None


@dataclass(frozen=True)
class Bowl:
    name: str
    dressing: str
    page: int | None = None
    additional_dressings: AdditionalDressings | None = None


Dish = Salad | Bowl


@dataclass(frozen=True)
class UsageEntry:
    """Everything that uses one dressing, directly or through a composite."""

    salads: tuple[Salad, ...] = ()
    bowls: tuple[Bowl, ...] = ()
    dressings: tuple[Dressing, ...] = ()


@dataclass(frozen=True)
class DressingOption:
    """A selectable search result."""

    value: str
    label: str


@dataclass(frozen=True)
class Dataset:
    dressings: tuple[Dressing, ...] = ()
    salads: tuple[Salad, ...] = ()
    bowls: tuple[Bowl, ...] = ()
