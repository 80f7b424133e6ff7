"""JSON round-trip for plain Python objects.

Converts objects to JSON-compatible data and restores parsed data as
instances of a caller-supplied type. Restoring attaches the behavior of the
target type (methods, properties) to the parsed fields:

    from selkie.shapes import Rectangle
    from selkie.serialization import to_json, from_json

    text = to_json(Rectangle(10, 20))      # '{"width": 10, "height": 20}'
    rect = from_json(Rectangle, text)
    assert rect.get_area() == 200

Dataclasses are rebuilt through their constructor using their declared
fields. Other classes are allocated without calling ``__init__`` and get the
parsed fields as instance attributes.

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import dataclasses
import json
import types
from enum import Enum
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from selkie.config import get_config
from selkie.errors import SerializationError

T = TypeVar("T")
from selkie.utils.logger import get_logger

logger = get_logger(__name__)


def to_dict(obj: Any) -> Any:
    """Convert an object to JSON-compatible data.

    Dataclasses and plain objects become dicts of their fields, enums become
    their values, tuples and sets become lists. Sets are sorted so output is
    stable; sets mixing unorderable types are sorted by ``repr``. Primitives
    pass through.

    Args:
        obj: Any object.

    Returns:
        JSON-compatible value.

    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_dict(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): to_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        # Mixed-type members have no natural order; fall back to repr order
        items = [to_dict(item) for item in obj]
        try:
            return sorted(items)
        except TypeError:
            return sorted(items, key=repr)
    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    if hasattr(obj, "__dict__"):
        return {k: to_dict(v) for k, v in vars(obj).items() if not k.startswith("_")}
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def from_dict(cls: type[T], data: Any) -> T:
    """Restore parsed data as an instance of ``cls``.

    Args:
        cls: Target type whose behavior is attached to the data.
        data: Dict of fields (as produced by to_dict).

    Returns:
        Instance of ``cls``.

    Raises:
        SerializationError: If data is not a dict, required fields are
            missing, or ``cls`` cannot hold arbitrary attributes.

    """
    if not isinstance(data, dict):
        raise SerializationError(cls, f"expected a JSON object, got {type(data).__name__}")

    if dataclasses.is_dataclass(cls):
        return _dataclass_from_dict(cls, data)

    obj = cls.__new__(cls)
    try:
        vars(obj).update(data)
    except TypeError as e:
        raise SerializationError(cls, "instances have no __dict__") from e
    return obj


def _dataclass_from_dict(cls: type[T], data: dict[str, Any]) -> T:
    hints = get_type_hints(cls)
    init_fields = [f for f in dataclasses.fields(cls) if f.init]  # type: ignore[arg-type]

    kwargs: dict[str, Any] = {}
    for f in init_fields:
        if f.name in data:
            kwargs[f.name] = _coerce(hints.get(f.name), data[f.name])

    ignored = data.keys() - {f.name for f in init_fields}
    if ignored:
        logger.debug("Ignoring unknown keys for %s: %s", cls.__name__, sorted(ignored))

    try:
        return cls(**kwargs)
    except TypeError as e:
        raise SerializationError(cls, str(e)) from e


def _coerce(hint: Any, value: Any) -> Any:
    """Convert a parsed value back to the type named by a field hint."""
    if value is None or hint is None:
        return value

    origin = get_origin(hint)
    if origin in (Union, types.UnionType):
        for arg in get_args(hint):
            if arg is type(None):
                continue
            if isinstance(arg, type) and isinstance(value, arg):
                return value
            if isinstance(arg, type) and (issubclass(arg, Enum) or dataclasses.is_dataclass(arg)):
                return _coerce(arg, value)
        return value

    if origin is tuple and isinstance(value, list):
        args = get_args(hint)
        item_hint = args[0] if args else None
        return tuple(_coerce(item_hint, item) for item in value)

    if isinstance(hint, type):
        if issubclass(hint, Enum):
            try:
                return hint(value)
            except ValueError as e:
                raise SerializationError(hint, f"{value!r} is not a valid value") from e
        if dataclasses.is_dataclass(hint):
            if not isinstance(value, dict):
                raise SerializationError(
                    hint, f"expected a JSON object, got {type(value).__name__}"
                )
            return _dataclass_from_dict(hint, value)
    return value


def to_json(obj: Any, *, indent: int | None = None, sort_keys: bool | None = None) -> str:
    """Serialize an object to a JSON string.

    Args:
        obj: Object to serialize.
        indent: JSON indentation level (config default when None).
        sort_keys: Sort object keys (config default when None).

    Returns:
        JSON string.

    """
    config = get_config()
    if indent is None:
        indent = config.json_indent
    if sort_keys is None:
        sort_keys = config.json_sort_keys
    return json.dumps(to_dict(obj), indent=indent, sort_keys=sort_keys)


def from_json(cls: type[T], data: str) -> T:
    """Deserialize a JSON string into an instance of ``cls``.

    Args:
        cls: Target type.
        data: JSON string (as produced by to_json).

    Returns:
        Instance of ``cls``.

    Raises:
        SerializationError: If the JSON is invalid or does not fit ``cls``.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(cls, f"invalid JSON ({e.msg})") from e
    return from_dict(cls, raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
