"""Whole-instance views of dataclasses: maps, value lists and zero checks.

Field tags are read from each field's metadata under :attr:`Struct.tag_name`
(``"structs"`` by default), in the form ``"name,option,option"``:

* a name renames the field's key in :meth:`Struct.to_map`;
* ``"-"`` leaves the field out entirely;
* ``omitempty`` leaves the field out while it holds its zero value;
* ``omitnested`` keeps a nested dataclass as it is instead of converting it;
* ``flatten`` merges a nested dataclass's map into the outer one;
* ``string`` uses the value's own ``__str__``, and drops values without one.

Fields whose names start with an underscore are not exported and are skipped
everywhere except :meth:`Struct.fields` and :meth:`Struct.names`.
"""

import dataclasses
from typing import Any, Dict, Iterator, List, NamedTuple, Optional

from .field import (
    DEFAULT_TAG_NAME,
    Field,
    _is_instance,
    _is_zero_value,
    _tag,
    _type_hints,
    get_fields,
    struct_value,
)
from .tags import TagOptions, parse_tag


class _Entry(NamedTuple):
    name: str
    key: str
    options: TagOptions
    value: Any
    hint: Any


def _is_stringer(value: Any) -> bool:
    return value is not None and type(value).__str__ is not object.__str__


def _holds_structs(items: Any) -> bool:
    return any(_is_instance(item) for item in items)


class Struct:
    """A dataclass instance seen as a whole.

    Raises ``TypeError`` if ``obj`` is not a dataclass instance.
    """

    def __init__(self, obj: Any) -> None:
        self._value = struct_value(obj)
        self.tag_name = DEFAULT_TAG_NAME

    def __repr__(self) -> str:
        return f"Struct({self._value!r})"

    def _entries(self) -> Iterator[_Entry]:
        hints = _type_hints(type(self._value))
        for spec in dataclasses.fields(self._value):
            if spec.name.startswith("_"):
                continue
            tag = _tag(spec, self.tag_name)
            if tag == "-":
                continue
            key, options = parse_tag(tag)
            yield _Entry(
                spec.name, key, options, getattr(self._value, spec.name), hints[spec.name]
            )

    def _nested(self, value: Any) -> Any:
        if _is_instance(value):
            inner = Struct(value)
            inner.tag_name = self.tag_name
            converted = inner.to_map()
            return converted if converted else value
        if isinstance(value, dict):
            members = list(value.values())
            if _holds_structs(members) or any(
                isinstance(member, (list, tuple)) and _holds_structs(member)
                for member in members
            ):
                return {str(key): self._nested(item) for key, item in value.items()}
            return value
        if isinstance(value, (list, tuple)) and _holds_structs(value):
            return [self._nested(item) for item in value]
        return value

    def to_map(self) -> Dict[str, Any]:
        """Return a dict of the exported fields, keyed by tag name or field name."""
        out: Dict[str, Any] = {}
        self.fill_map(out)
        return out

    def fill_map(self, out: Optional[Dict[str, Any]]) -> None:
        """Like :meth:`to_map`, but write into ``out``; ``None`` is ignored."""
        if out is None:
            return
        for entry in self._entries():
            key = entry.key or entry.name
            value = entry.value
            if entry.options.has("omitempty") and _is_zero_value(value, entry.hint):
                continue
            if entry.options.has("string"):
                if _is_stringer(value):
                    out[key] = str(value)
                continue
            if entry.options.has("omitnested"):
                final, is_sub = value, False
            else:
                final = self._nested(value)
                is_sub = isinstance(value, dict) or _is_instance(value)
            if is_sub and entry.options.has("flatten") and isinstance(final, dict):
                out.update(final)
            else:
                out[key] = final

    def values(self) -> List[Any]:
        """Return the exported field values, nested dataclasses spread in place."""
        result: List[Any] = []
        for entry in self._entries():
            value = entry.value
            if entry.options.has("omitempty") and _is_zero_value(value, entry.hint):
                continue
            if entry.options.has("string"):
                if _is_stringer(value):
                    result.append(str(value))
                continue
            if is_struct(value) and not entry.options.has("omitnested"):
                result.extend(values(value))
            else:
                result.append(value)
        return result

    def fields(self) -> List[Field]:
        """Return every field not tagged ``"-"``, exported or not."""
        return get_fields(self._value, self.tag_name)

    def names(self) -> List[str]:
        """Return the names of :meth:`fields`."""
        return [item.name() for item in self.fields()]

    def field(self, name: str) -> Field:
        """Return the field ``name``; raise ``KeyError`` if there is none."""
        return Field(self._value, name, self.tag_name)

    def field_ok(self, name: str) -> Optional[Field]:
        """Return the field ``name``, or ``None`` if there is none."""
        try:
            return self.field(name)
        except KeyError:
            return None

    def is_zero(self) -> bool:
        """Return whether every exported field holds its zero value."""
        for entry in self._entries():
            if is_struct(entry.value) and not entry.options.has("omitnested"):
                if not is_zero(entry.value):
                    return False
                continue
            if not _is_zero_value(entry.value, entry.hint):
                return False
        return True

    def has_zero(self) -> bool:
        """Return whether any exported field holds its zero value."""
        for entry in self._entries():
            if is_struct(entry.value) and not entry.options.has("omitnested"):
                if has_zero(entry.value):
                    return True
                continue
            if _is_zero_value(entry.value, entry.hint):
                return True
        return False

    def name(self) -> str:
        """Return the dataclass's class name."""
        return type(self._value).__name__


def to_map(obj: Any) -> Dict[str, Any]:
    """Shorthand for ``Struct(obj).to_map()``."""
    return Struct(obj).to_map()


def fill_map(obj: Any, out: Optional[Dict[str, Any]]) -> None:
    """Shorthand for ``Struct(obj).fill_map(out)``."""
    Struct(obj).fill_map(out)


def values(obj: Any) -> List[Any]:
    """Shorthand for ``Struct(obj).values()``."""
    return Struct(obj).values()


def fields(obj: Any) -> List[Field]:
    """Shorthand for ``Struct(obj).fields()``."""
    return Struct(obj).fields()


def names(obj: Any) -> List[str]:
    """Shorthand for ``Struct(obj).names()``."""
    return Struct(obj).names()


def is_zero(obj: Any) -> bool:
    """Shorthand for ``Struct(obj).is_zero()``."""
    return Struct(obj).is_zero()


def has_zero(obj: Any) -> bool:
    """Shorthand for ``Struct(obj).has_zero()``."""
    return Struct(obj).has_zero()


def is_struct(obj: Any) -> bool:
    """Return whether ``obj`` is a dataclass instance."""
    return _is_instance(obj)


def name(obj: Any) -> str:
    """Shorthand for ``Struct(obj).name()``."""
    return Struct(obj).name()