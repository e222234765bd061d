"""Configuration loader for the vehicle catalog."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml

from vehicle_advisor.core.vehicle import VehicleRecord

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
CATALOG_PATH: Path = DATA_DIR / "vehicles.yaml"
CATALOG_ENV_VAR: str = "VEHICLE_ADVISOR_CATALOG"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "type", "range", "seats")


def catalog_path() -> Path:
    """Return the catalog path, honouring ``VEHICLE_ADVISOR_CATALOG``."""
    override = os.getenv(CATALOG_ENV_VAR)
    return Path(override) if override else CATALOG_PATH


def load_catalog(path: Path | None = None) -> tuple[VehicleRecord, ...]:
    """Load the vehicle catalog from a YAML file.

    Each entry is validated and converted into a :class:`VehicleRecord`.
    File order is preserved; it is the tie-break order used when ranking.

    Args:
        path: Optional override for the catalog file path.

    Returns:
        Immutable tuple of :class:`VehicleRecord` objects.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        ValueError: If the file has no ``vehicles`` list, or any entry is
            missing fields, has wrong types, out-of-range values, an
            unknown type, or a duplicate name.
    """
    vehicles_path = Path(path) if path is not None else catalog_path()
    if not vehicles_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {vehicles_path}")

    with open(vehicles_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("vehicles"), list):
        raise ValueError(f"Catalog {vehicles_path} must define a 'vehicles' list")

    entries: list[dict] = data["vehicles"]
    records: list[VehicleRecord] = []
    seen: set[str] = set()

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Vehicle entry {idx} must be a mapping")

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Vehicle entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        name = entry["name"]
        if not isinstance(name, str) or not name:
            raise ValueError(f"Vehicle entry {idx}: 'name' must be a non-empty string")
        if name in seen:
            raise ValueError(f"Vehicle entry {idx}: duplicate name '{name}'")

        # --- Validate type and numeric fields ---
        try:
            record = VehicleRecord(
                name=name,
                type=entry["type"],
                range=entry["range"],
                seats=entry["seats"],
            )
        except ValueError as exc:
            raise ValueError(f"Vehicle entry {idx} ({name}): {exc}") from exc

        seen.add(name)
        records.append(record)

    logger.info("Loaded %d vehicles from %s", len(records), vehicles_path)
    return tuple(records)


@lru_cache(maxsize=1)
def default_catalog() -> tuple[VehicleRecord, ...]:
    """Return the process-wide catalog, loading it on first use."""
    return load_catalog()
