"""Access to the fields of dataclass instances by name.

Tags live in each field's metadata under the tag name, for example
``field(metadata={"structs": "name,omitempty", "json": "name"})``. A field whose
metadata holds ``"embedded": True`` is embedded: the fields of the dataclass it
holds can be looked up through the outer one. Fields whose names start with an
underscore are not exported.
"""

import dataclasses
import functools
import types
import typing
from typing import Any, Dict, List, Optional, Tuple, Union

DEFAULT_TAG_NAME = "structs"

_UNION_ORIGINS = (Union, types.UnionType)
_BUILTIN_ZEROS = frozenset(
    {bool, int, float, complex, str, bytes, bytearray, list, dict, tuple, set, frozenset}
)
_BUILTIN_NAMES = {cls.__name__: cls for cls in _BUILTIN_ZEROS | {object}}


class NotExportedError(AttributeError):
    """The field is not exported."""

    def __init__(self) -> None:
        super().__init__("field is not exported")


class NotSettableError(AttributeError):
    """The field belongs to an object that cannot be changed."""

    def __init__(self) -> None:
        super().__init__("field is not settable")


def _annotation(spec: dataclasses.Field) -> Any:
    """The field's declared type; textual annotations name builtins or mean ``Any``."""
    hint = spec.type
    if isinstance(hint, str):
        text = hint.strip()
        if text == "None":
            return type(None)
        return _BUILTIN_NAMES.get(text, Any)
    return hint


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return {spec.name: _annotation(spec) for spec in dataclasses.fields(cls)}


def _is_instance(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def _tag(spec: dataclasses.Field, key: str) -> str:
    value = spec.metadata.get(key, "")
    return value if isinstance(value, str) else ""


def _declared_class(hint: Any) -> Optional[type]:
    """The class a non-union annotation stands for, if it has one."""
    origin = typing.get_origin(hint)
    if origin is None:
        return hint if isinstance(hint, type) else None
    if origin in _UNION_ORIGINS or not isinstance(origin, type):
        return None
    return origin


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) in _UNION_ORIGINS:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return _unwrap_optional(args[0])
    return hint


def _kind(hint: Any) -> type:
    cls = _declared_class(_unwrap_optional(hint))
    return cls if cls is not None else object


def _zero_of(hint: Any) -> Any:
    if typing.get_origin(hint) in _UNION_ORIGINS:
        args = typing.get_args(hint)
        if type(None) in args:
            return None
        return _zero_of(args[0])
    cls = _declared_class(hint)
    if cls is None:
        return None
    if dataclasses.is_dataclass(cls):
        hints = _type_hints(cls)
        return cls(
            **{
                spec.name: _zero_of(hints[spec.name])
                for spec in dataclasses.fields(cls)
                if spec.init
            }
        )
    if cls in _BUILTIN_ZEROS:
        return cls()
    return None


def _is_zero_value(value: Any, hint: Any) -> bool:
    cls = _declared_class(hint)
    if cls is not None and dataclasses.is_dataclass(cls) and isinstance(value, cls):
        hints = _type_hints(type(value))
        return all(
            _is_zero_value(getattr(value, spec.name), hints[spec.name])
            for spec in dataclasses.fields(value)
        )
    zero = _zero_of(hint)
    if zero is None:
        return value is None
    return value == zero


def _accepts(hint: Any, value: Any) -> bool:
    if hint is Any or hint is object or isinstance(hint, str):
        return True
    if hint is None or hint is type(None):
        return value is None
    if typing.get_origin(hint) in _UNION_ORIGINS:
        return any(_accepts(arg, value) for arg in typing.get_args(hint))
    cls = _declared_class(hint)
    if cls is None:
        return True
    if cls is bool:
        return isinstance(value, bool)
    if cls is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if cls is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, cls)


def _type_name(hint: Any) -> str:
    kind = _kind(hint)
    return "interface" if kind is object else kind.__name__


def _resolve(obj: Any, name: str) -> Optional[Tuple[Any, dataclasses.Field]]:
    """Find ``name`` directly on ``obj`` or promoted from embedded fields.

    The shallowest match wins; two matches at the same depth are ambiguous
    and count as not found.
    """
    level = [obj]
    seen = {id(obj)}
    while level:
        matches = [
            (owner, spec)
            for owner in level
            for spec in dataclasses.fields(owner)
            if spec.name == name
        ]
        if len(matches) == 1:
            return matches[0]
        if matches:
            return None
        deeper = []
        for owner in level:
            for spec in dataclasses.fields(owner):
                if spec.metadata.get("embedded") is not True:
                    continue
                inner = getattr(owner, spec.name, None)
                if _is_instance(inner) and id(inner) not in seen:
                    seen.add(id(inner))
                    deeper.append(inner)
        level = deeper
    return None


def struct_value(obj: Any) -> Any:
    """Return ``obj`` if it is a dataclass instance, else raise ``TypeError``."""
    if not _is_instance(obj):
        raise TypeError("not struct")
    return obj


class Field:
    """One field of a dataclass instance, looked up by name.

    Raises ``KeyError`` if the instance has no such field, directly or
    through an embedded field.
    """

    def __init__(self, owner: Any, name: str, default_tag: str = DEFAULT_TAG_NAME) -> None:
        found = _resolve(struct_value(owner), name)
        if found is None:
            raise KeyError(f"field not found: {name}")
        self._owner, self._spec = found
        self._hint = _type_hints(type(self._owner))[self._spec.name]
        self._tag_name = default_tag

    def __repr__(self) -> str:
        return f"Field({type(self._owner).__name__}.{self._spec.name})"

    def _raw(self) -> Any:
        return getattr(self._owner, self._spec.name)

    def tag(self, key: str) -> str:
        """Return the tag stored under ``key``, or ``""`` if there is none."""
        return _tag(self._spec, key)

    def value(self) -> Any:
        """Return the field's current value; unexported fields raise."""
        if not self.is_exported():
            raise NotExportedError()
        return self._raw()

    def is_embedded(self) -> bool:
        """Return whether the field is marked as embedded."""
        return self._spec.metadata.get("embedded") is True

    def is_exported(self) -> bool:
        """Return whether the field's name does not start with an underscore."""
        return not self._spec.name.startswith("_")

    def is_zero(self) -> bool:
        """Return whether the field holds the zero value of its declared type."""
        return _is_zero_value(self.value(), self._hint)

    def name(self) -> str:
        """Return the field's name."""
        return self._spec.name

    def kind(self) -> type:
        """Return the class the field is declared with, ``Optional`` removed.

        Generic annotations give their origin, such as ``list``; annotations
        that name no single class give ``object``.
        """
        return _kind(self._hint)

    def set(self, value: Any) -> None:
        """Assign ``value`` to the field.

        Raises :class:`NotExportedError`, :class:`NotSettableError` for frozen
        dataclasses, or ``TypeError`` if ``value`` does not fit the declared type.
        """
        if not self.is_exported():
            raise NotExportedError()
        params = getattr(type(self._owner), "__dataclass_params__", None)
        if getattr(params, "frozen", False):
            raise NotSettableError()
        if not _accepts(self._hint, value):
            raise TypeError(
                f"wrong kind. got: {type(value).__name__} want: {_type_name(self._hint)}"
            )
        setattr(self._owner, self._spec.name, value)

    def zero(self) -> None:
        """Set the field to the zero value of its declared type."""
        self.set(_zero_of(self._hint))

    def fields(self) -> List["Field"]:
        """Return the fields of the dataclass this field holds."""
        return get_fields(self._raw(), self._tag_name)

    def field(self, name: str) -> "Field":
        """Return the field ``name`` of the nested dataclass; raise ``KeyError`` if absent."""
        found = self.field_ok(name)
        if found is None:
            raise KeyError(f"field not found: {name}")
        return found

    def field_ok(self, name: str) -> Optional["Field"]:
        """Return the field ``name`` of the nested dataclass, or ``None`` if absent."""
        nested = struct_value(self.value())
        try:
            return Field(nested, name, self._tag_name)
        except KeyError:
            return None


def get_fields(obj: Any, tag_name: str = DEFAULT_TAG_NAME) -> List[Field]:
    """Return every field of ``obj`` except those tagged ``"-"`` under ``tag_name``."""
    owner = struct_value(obj)
    return [
        Field(owner, spec.name, tag_name)
        for spec in dataclasses.fields(owner)
        if _tag(spec, tag_name) != "-"
    ]