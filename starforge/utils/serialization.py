"""Generated universe serialization to/from JSON.

Every dataclass is written as an object tagged with its class name under
``"type"``, so the variants of a union (galaxy categories, neighborhood
densities, astronomical objects, body details...) come back as the same
classes. Enums are tagged the same way and stored by member name. Dicts and
tuples are tagged too, since JSON has neither non-string keys nor tuples.
"""

import dataclasses
import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Type

from pydantic import BaseModel, ValidationError

from .. import models
from ..models import GeneratedUniverse, GenerationSettings
from .errors import ConfigurationError

FORMAT_VERSION = 1


def _collect_types() -> Dict[str, Type]:
    types: Dict[str, Type] = {}
    for name in models.__all__:
        obj = getattr(models, name)
        if isinstance(obj, type) and (dataclasses.is_dataclass(obj) or issubclass(obj, Enum)):
            types[obj.__name__] = obj
    return types


SERIALIZABLE_TYPES = _collect_types()


def save_universe(universe: GeneratedUniverse, filepath: str) -> None:
    """Save a generated universe to a JSON file.

    Args:
        universe: Generated universe to save, with whatever divisions and
            hexes its galaxies have cached so far
        filepath: Path of the file to write

    Example:
        save_universe(generated, "universe.json")
    """
    path = Path(filepath)
    data = {"version": FORMAT_VERSION, "universe": _serialize(universe)}
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def load_universe(filepath: str) -> GeneratedUniverse:
    """Load a generated universe from a JSON file.

    Args:
        filepath: Path of a file written by save_universe

    Returns:
        The GeneratedUniverse, equal to the one saved

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the JSON is invalid or malformed
    """
    path = Path(filepath)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Universe file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict) or data.get("version") != FORMAT_VERSION:
        raise ConfigurationError(f"Universe file {path} has an unknown format")
    universe = _deserialize(data.get("universe"))
    if not isinstance(universe, GeneratedUniverse):
        raise ConfigurationError(f"Universe file {path} does not hold a generated universe")
    return universe


def _serialize(value: Any) -> Any:
    """Convert a model value to a JSON-compatible value."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    elif isinstance(value, Enum):
        return {"type": type(value).__name__, "name": value.name}
    elif isinstance(value, BaseModel):
        return {"type": type(value).__name__, "data": value.model_dump(mode="json")}
    elif dataclasses.is_dataclass(value):
        data = {"type": type(value).__name__}
        for f in dataclasses.fields(value):
            data[f.name] = _serialize(getattr(value, f.name))
        return data
    elif isinstance(value, dict):
        return {
            "type": "dict",
            "items": [[_serialize(k), _serialize(v)] for k, v in value.items()],
        }
    elif isinstance(value, tuple):
        return {"type": "tuple", "items": [_serialize(v) for v in value]}
    elif isinstance(value, list):
        return [_serialize(v) for v in value]
    raise TypeError(f"Cannot serialize {value!r}")


def _deserialize(data: Any) -> Any:
    """Rebuild a model value from its JSON-compatible form.

    Raises:
        ConfigurationError: On an unknown type tag or invalid fields
    """
    if data is None or isinstance(data, (bool, int, float, str)):
        return data
    elif isinstance(data, list):
        return [_deserialize(v) for v in data]
    elif not isinstance(data, dict) or "type" not in data:
        raise ConfigurationError(f"Untagged value in universe file: {data!r}")

    tag = data["type"]
    if tag in ("dict", "tuple"):
        items = data.get("items")
        if not isinstance(items, list):
            raise ConfigurationError(f"Malformed {tag} in universe file: {data!r}")
        if tag == "tuple":
            return tuple(_deserialize(v) for v in items)
        try:
            return {_deserialize(k): _deserialize(v) for k, v in items}
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed dict in universe file: {e}") from e
    elif tag == GenerationSettings.__name__:
        try:
            return GenerationSettings.model_validate(data["data"])
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in universe file: {e}") from e

    cls = SERIALIZABLE_TYPES.get(tag)
    if cls is None:
        raise ConfigurationError(f"Unknown type in universe file: {tag}")
    if issubclass(cls, Enum):
        try:
            return cls[data["name"]]
        except KeyError as e:
            raise ConfigurationError(f"Unknown {tag} member: {data.get('name')}") from e
    kwargs = {f.name: _deserialize(data[f.name]) for f in dataclasses.fields(cls) if f.name in data}
    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {tag} in universe file: {e}") from e
