"""
Input coercion shared by all builders.

Builders take loosely typed records deserialized from storage or authored by
hand. These helpers read one field at a time and either return it in
canonical form or raise the matching HeroDataError.

Presence rule: a field is missing when its key is absent or its value is the
empty string. Any other value, None included, is present and gets coerced.
"""

import json
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union, get_args

from pydantic import BaseModel

from hero_kernel.errors import InvalidType, MissingRequiredField, NotAnArray
from hero_kernel.models.base import CanonicalModel

M = TypeVar("M", bound=CanonicalModel)

Number = Union[int, float]

# Returned by preferred() when none of the keys is present
MISSING = object()


def as_record(data: Any) -> Mapping:
    """Treat None and non-mappings as an empty record; unwrap built models."""
    if isinstance(data, CanonicalModel):
        return data.to_dict()
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True)
    if isinstance(data, Mapping):
        return data
    return {}


def is_missing(record: Mapping, key: str) -> bool:
    return key not in record or (isinstance(record[key], str) and record[key] == "")


def to_text(value: Any) -> str:
    """Stringify a scalar the way JSON spells it: True -> "true", None -> "null"."""
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    return json.dumps(value, default=str)


def parse_number(value: Any) -> Optional[Number]:
    """Return a finite number, or None when the value is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return None
        number = value
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if number.is_integer():
            number = int(number)
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def required(record: Mapping, key: str, entity: str, message: str) -> Any:
    if is_missing(record, key):
        raise MissingRequiredField(message, entity=entity, field=key)
    return record[key]


def required_text(record: Mapping, key: str, entity: str, message: str) -> str:
    return to_text(required(record, key, entity, message))


def preferred(record: Mapping, *keys: str) -> Any:
    """First present value among keys, so the canonical name wins over legacy ones."""
    for key in keys:
        if not is_missing(record, key):
            return record[key]
    return MISSING


def optional_text(record: Mapping, key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None or value == "":
        return default
    return to_text(value)


def optional_list(record: Mapping, key: str, entity: str, message: str) -> List[Any]:
    """A list field that defaults to []; any non-list value is rejected."""
    value = record.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise NotAnArray(message, entity=entity, field=key)
    return list(value)


def text_list(record: Mapping, key: str, entity: str, message: str) -> List[str]:
    return [to_text(item) for item in optional_list(record, key, entity, message)]


def nested_record(value: Any, entity: str, field: str, message: str) -> Mapping:
    """A sub-object; None becomes {}, anything that is not a mapping is rejected."""
    if value is None:
        return {}
    if isinstance(value, (Mapping, BaseModel)):
        return as_record(value)
    raise InvalidType(message, entity=entity, field=field)


def _list_item_type(annotation: Any) -> Any:
    args = get_args(annotation)
    return args[0] if args else None


def build_section(
    model: Type[M],
    data: Any,
    path: str,
    item_builders: Optional[Dict[str, Callable[[Any], Any]]] = None,
) -> M:
    """
    Build a document section from its model's default table.

    Fields the input supplies are coerced to the type of their default:
    strings are stringified, lists must be lists (items built with the matching
    item builder, nested models or plain objects), nested sections recurse.
    Fields the input omits keep their default. Unknown keys are dropped.
    """
    record = nested_record(data, model.__name__, path, f"{path} must be an object")
    item_builders = item_builders or {}
    values: Dict[str, Any] = {}

    for name, field in model.model_fields.items():
        key = field.alias or name
        value = record.get(key)
        if value is None:
            continue
        field_path = f"{path}.{key}"
        default = field.get_default(call_default_factory=True)

        if isinstance(default, CanonicalModel):
            values[name] = build_section(type(default), value, field_path)
        elif isinstance(default, list):
            items = optional_list(record, key, model.__name__, f"{field_path} must be an array")
            values[name] = [
                _build_item(item, _list_item_type(field.annotation), field_path, item_builders.get(key))
                for item in items
            ]
        elif isinstance(default, str):
            values[name] = to_text(value)
        else:
            values[name] = value

    return model(**values)


def _build_item(
    item: Any,
    item_type: Any,
    path: str,
    builder: Optional[Callable[[Any], Any]],
) -> Any:
    if builder is not None:
        return builder(item)
    if isinstance(item_type, type) and issubclass(item_type, CanonicalModel):
        return build_section(item_type, item, path)
    if item_type is dict:
        return dict(nested_record(item, path, path, f"{path} entries must be objects"))
    return to_text(item)
