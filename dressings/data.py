"""Static dressing/salad/bowl dataset loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from dressings.config import resolve_data_path
from dressings.models import Bowl, Dataset, Dressing, Salad


class DatasetError(ValueError):
    """Raised when the dataset is malformed or references unknown dressings."""


def _records(raw: dict[str, Any], key: str) -> list[dict[str, Any]]:
    records = raw.get(key, [])
    if not isinstance(records, list):
        raise DatasetError(f"{key!r} must be a list")
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            raise DatasetError(f"{key}[{idx}] must be an object")
    return records


def _name(record: dict[str, Any], where: str) -> str:
    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise DatasetError(f"{where} has a missing or blank name")
    return name


def _page(record: dict[str, Any], where: str) -> int | None:
    page = record.get("page")
    if page is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(page, bool) or not isinstance(page, int):
        raise DatasetError(f"{where} has a non-integer page: {page!r}")
    return page


def _dressing_ref(record: dict[str, Any], where: str) -> str:
    dressing = record.get("dressing")
    if not isinstance(dressing, str) or not dressing.strip():
        raise DatasetError(f"{where} has a missing or blank dressing")
    return dressing


def _components(record: dict[str, Any], where: str) -> tuple[str, ...]:
    components = record.get("components")
    if components is None:
        return ()
    if not isinstance(components, list) or not all(isinstance(c, str) for c in components):
        raise DatasetError(f"{where} components must be a list of names")
    return tuple(components)


def parse_dataset(raw: Any) -> Dataset:
    """Build and validate a Dataset from already-decoded JSON."""
    if not isinstance(raw, dict):
        raise DatasetError("dataset must be an object with dressings, salads and bowls")

    dressings: list[Dressing] = []
    for record in _records(raw, "dressings"):
        where = f"dressing {record.get('name')!r}"
        dressings.append(
            Dressing(
                name=_name(record, where),
                page=_page(record, where),
                components=_components(record, where),
            )
        )

    salads: list[Salad] = []
    for record in _records(raw, "salads"):
        where = f"salad {record.get('name')!r}"
        salads.append(Salad(name=_name(record, where), dressing=_dressing_ref(record, where), page=_page(record, where)))

    bowls: list[Bowl] = []
    for record in _records(raw, "bowls"):
        where = f"bowl {record.get('name')!r}"
        bowls.append(Bowl(name=_name(record, where), dressing=_dressing_ref(record, where), page=_page(record, where)))

    dataset = Dataset(dressings=tuple(dressings), salads=tuple(salads), bowls=tuple(bowls))
    validate_dataset(dataset)
    return dataset


def validate_dataset(dataset: Dataset) -> None:
    """Check name uniqueness and that every reference names a known dressing."""
    known: set[str] = set()
    for dressing in dataset.dressings:
        if dressing.name in known:
            raise DatasetError(f"duplicate dressing name: {dressing.name!r}")
        known.add(dressing.name)

    for dressing in dataset.dressings:
        for component in dressing.components:
            if component == dressing.name:
                raise DatasetError(f"dressing {dressing.name!r} lists itself as a component")
            if component not in known:
                raise DatasetError(f"dressing {dressing.name!r} lists unknown component {component!r}")

    for kind, dishes in (("salad", dataset.salads), ("bowl", dataset.bowls)):
        for dish in dishes:
            if dish.dressing not in known:
                raise DatasetError(f"{kind} {dish.name!r} requires unknown dressing {dish.dressing!r}")


def load_dataset(path: Path | str | None = None) -> Dataset:
    """Read and validate the JSON dataset, defaulting to the configured path."""
    data_file = Path(path) if path is not None else resolve_data_path()
    try:
        with data_file.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"{data_file} is not valid JSON: {exc}") from exc
    return parse_dataset(raw)
