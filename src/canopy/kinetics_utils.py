from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from canopy.kinetics_types import (
    TEMP_DEP_TYPES,
    TempDepModel,
    TemperatureDependenceParams,
)

logger = logging.getLogger("canopy.kinetics")


def _field_names(model: str) -> tuple[str, ...]:
    return tuple(f.name for f in dataclasses.fields(TEMP_DEP_TYPES[model]))


@dataclass(frozen=True)
class TemperatureDependenceConfig:
    """Configuration for building a temperature dependence parameter record.

    Attributes:
        model: Temperature dependence model ("q10", "arrhenius", "enzyme").
        parameters: Field values of the matching record, e.g.
            {"q10": 2.0, "reference_temperature": 298.15, "reference_rate": 1.0}.
    """

    model: TempDepModel
    parameters: Mapping[str, float]

    def __post_init__(self):
        """Validate configuration after initialization."""
        valid_models = list(TEMP_DEP_TYPES)
        if self.model not in valid_models:
            raise ValueError(
                f"model must be one of {valid_models}, got {self.model}"
            )

        expected = _field_names(self.model)
        missing = [name for name in expected if name not in self.parameters]
        if missing:
            raise ValueError(
                f"Missing parameters for model '{self.model}': {missing}"
            )

        unknown = [name for name in self.parameters if name not in expected]
        if unknown:
            raise ValueError(
                f"Unknown parameters for model '{self.model}': {unknown}"
            )


def build_temp_dep_from_config(
    config: TemperatureDependenceConfig,
) -> TemperatureDependenceParams:
    """Build a temperature dependence record from a configuration object."""
    record_type = TEMP_DEP_TYPES[config.model]

    values = {}
    for name, value in config.parameters.items():
        try:
            values[name] = float(value)
        except (TypeError, ValueError) as err:
            raise ValueError(
                f"Parameter '{name}' of model '{config.model}' must be a number, "
                f"got {value!r}."
            ) from err

    return record_type(**values)


def temp_dep_from_dict(entry: Mapping) -> TemperatureDependenceParams:
    """Build a record from a flat entry {"model": ..., <field>: <value>, ...}."""
    if not isinstance(entry, Mapping):
        raise ValueError(f"Temperature dependence entry must be an object: {entry}")
    if "model" not in entry:
        raise ValueError(f"Temperature dependence entry has no 'model': {entry}")

    parameters = {k: v for k, v in entry.items() if k not in ("model", "name")}
    config = TemperatureDependenceConfig(
        model=str(entry["model"]).lower(), parameters=parameters
    )
    return build_temp_dep_from_config(config)


def load_temp_deps_from_json(
    json_path: str | Path,
) -> dict[str, TemperatureDependenceParams]:
    """Load named temperature dependence records from a JSON file.

    Two layouts are accepted:
        {"Vcmax": {"model": "enzyme", ...}, "Rd": {"model": "q10", ...}}
        {"temp_deps": [{"name": "Vcmax", "model": "enzyme", ...}, ...]}

    Returns:
        Records keyed by name, in file order.
    """
    raw_data = json.loads(Path(json_path).read_text(encoding="utf-8"))

    if isinstance(raw_data, dict) and "temp_deps" in raw_data:
        entries = raw_data["temp_deps"]
        if not isinstance(entries, list):
            raise ValueError("'temp_deps' must be an array.")
        named_entries = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise ValueError(
                    f"Temperature dependence entry must be an object: {entry}"
                )
            if "name" not in entry:
                raise ValueError(f"Temperature dependence entry has no 'name': {entry}")
            named_entries.append((entry["name"], entry))
    elif isinstance(raw_data, dict):
        named_entries = list(raw_data.items())
    else:
        raise ValueError("JSON must contain a 'temp_deps' array or be an object.")

    temp_deps: dict[str, TemperatureDependenceParams] = {}
    for name, entry in named_entries:
        if name in temp_deps:
            raise ValueError(f"Duplicate temperature dependence name '{name}'.")
        temp_deps[name] = temp_dep_from_dict(entry)
        logger.debug("Loaded %s temperature dependence '%s'", entry["model"], name)

    logger.info("Loaded %d temperature dependences from %s", len(temp_deps), json_path)
    return temp_deps
