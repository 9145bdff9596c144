# config_helper/controllers/descriptors.py
"""
Explicit binding schema declared on dataclasses.

A root dataclass marks its section fields with ``config_section(...)``; each
section dataclass marks its value fields with ``config_value(...)``. Both
helpers return an ordinary ``dataclasses.field`` with the declaration stored in
the field metadata, so all regular ``field`` arguments (``default``,
``default_factory`` ...) are accepted. ``parse_sections`` turns the
declarations into descriptors the binder works from.

Name matching: a declaration that supplies its own ``title``/``label`` matches
document names ignoring case; one that falls back to the field name matches
case-sensitively.

Example
-------
>>> @dataclass
... class Network:
...     host: str = config_value(label="Host", fallback="localhost")
...     port: Int32 = config_value(default=0)
>>> @config_header(title="Service settings")
... @dataclass
... class Settings:
...     network: Optional[Network] = config_section(title="Network", default=None)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union, get_type_hints

from ..utilities.core_util import equals_ignore_case, is_null_or_whitespace, unwrap_optional

METADATA_KEY = "config_helper"
HEADER_ATTRIBUTE = "__config_header__"

C = TypeVar("C", bound=type)


# region Declarations


@dataclass(frozen=True)
class SectionAttribute:
    title: Optional[str] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class ValueAttribute:
    label: Optional[str] = None
    comment: Optional[str] = None
    fallback: Any = None
    parser: Optional[type] = None


@dataclass(frozen=True)
class HeaderAttribute:
    title: Optional[str] = None
    extended: bool = True
    placeholders: bool = False


def _with_metadata(attribute: object, field_kwargs: Dict[str, Any]) -> Any:
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = attribute
    return dataclasses.field(metadata=metadata, **field_kwargs)


def config_section(
    title: Optional[str] = None, comment: Optional[str] = None, **field_kwargs: Any
) -> Any:
    """Declare a dataclass field as a configuration section."""
    return _with_metadata(SectionAttribute(title, comment), field_kwargs)


def config_value(
    label: Optional[str] = None,
    comment: Optional[str] = None,
    fallback: Any = None,
    parser: Optional[type] = None,
    **field_kwargs: Any,
) -> Any:
    """
    Declare a dataclass field as a configuration value.

    ``fallback`` is written when the field is ``None`` at emission time;
    ``parser`` names an ``ICustomParser`` implementation replacing the built-in
    conversion for this field.
    """
    return _with_metadata(ValueAttribute(label, comment, fallback, parser), field_kwargs)


def config_header(
    cls: Optional[C] = None,
    *,
    title: Optional[str] = None,
    extended: bool = True,
    placeholders: bool = False,
) -> Union[C, Callable[[C], C]]:
    """
    Class decorator attaching a boilerplate header to emitted content.

    Usable bare (``@config_header``) or with arguments
    (``@config_header(title="...", placeholders=True)``).
    """

    def apply(target: C) -> C:
        setattr(target, HEADER_ATTRIBUTE, HeaderAttribute(title, extended, placeholders))
        return target

    if cls is None:
        return apply
    return apply(cls)


def header_attribute(cls: type) -> Optional[HeaderAttribute]:
    found = getattr(cls, HEADER_ATTRIBUTE, None)
    return found if isinstance(found, HeaderAttribute) else None


# endregion Declarations

# region Descriptors


@dataclass(frozen=True)
class AttributeDescriptor:
    """Resolved matching name of a declared field and its comparison rule."""

    field_name: str
    name: str
    explicit: bool
    comment: Optional[str]
    field_type: Any

    def matches(self, other: Optional[str]) -> bool:
        if other is None:
            return False
        if self.explicit:
            return equals_ignore_case(self.name, other.strip())
        return self.name == other.strip()


@dataclass(frozen=True)
class ValueDescriptor(AttributeDescriptor):
    fallback: Any = None
    parser: Optional[type] = None


@dataclass(frozen=True)
class SectionDescriptor(AttributeDescriptor):
    values: tuple[ValueDescriptor, ...] = ()


def _resolve_name(declared: Optional[str], field_name: str) -> tuple[str, bool]:
    if declared is None or is_null_or_whitespace(declared):
        return field_name, False
    return declared.strip(), True


def _declared_fields(cls: type, kind: type) -> List[tuple[dataclasses.Field[Any], Any, Any]]:
    if not dataclasses.is_dataclass(cls):
        return []
    hints = get_type_hints(cls, include_extras=True)
    result = []
    for f in dataclasses.fields(cls):
        attribute = f.metadata.get(METADATA_KEY)
        if isinstance(attribute, kind):
            result.append((f, attribute, hints.get(f.name, f.type)))
    return result


def parse_values(cls: type) -> List[ValueDescriptor]:
    """Descriptors of the ``config_value`` fields of a section dataclass."""
    result = []
    for f, attribute, hint in _declared_fields(cls, ValueAttribute):
        name, explicit = _resolve_name(attribute.label, f.name)
        result.append(
            ValueDescriptor(
                field_name=f.name,
                name=name,
                explicit=explicit,
                comment=attribute.comment,
                field_type=hint,
                fallback=attribute.fallback,
                parser=attribute.parser,
            )
        )
    return result


def parse_sections(cls: type) -> List[SectionDescriptor]:
    """
    Descriptors of the ``config_section`` fields of a root dataclass.

    Raises
    ------
    TypeError
        If ``cls`` is not a dataclass type.
    """
    if not isinstance(cls, type) or not dataclasses.is_dataclass(cls):
        raise TypeError(f"Expected a dataclass type, got {cls!r}")
    result = []
    for f, attribute, hint in _declared_fields(cls, SectionAttribute):
        name, explicit = _resolve_name(attribute.title, f.name)
        section_type, _ = unwrap_optional(hint)
        values = parse_values(section_type) if isinstance(section_type, type) else []
        result.append(
            SectionDescriptor(
                field_name=f.name,
                name=name,
                explicit=explicit,
                comment=attribute.comment,
                field_type=hint,
                values=tuple(values),
            )
        )
    return result


# endregion Descriptors
