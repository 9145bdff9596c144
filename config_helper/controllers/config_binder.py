# config_helper/controllers/config_binder.py
"""
Binding between ``ConfigContent`` and declared dataclass object graphs.

Document → object (``to_instance``)
    The root type and every matched section type are built with a no-argument
    call. Declared values found in their section are converted with the scalar
    registry (or the field's custom parser) and assigned. Missing sections,
    missing values, unsupported types and failed conversions leave the field
    at its default; they are logged at DEBUG only.

Object → document (``to_content``)
    Every declared section is emitted, in declaration order, even when the
    field holds ``None`` (the section then has no values). Each value is
    rendered from the field, from its declared ``fallback`` when the field is
    ``None``, or as empty text.

Custom parsers
    A parser that cannot be constructed, does not implement ``ICustomParser``
    or declares a different handled type is ignored for that field. A
    ``CustomParserError`` raised by a parser propagates unchanged; any other
    exception is wrapped in ``ConfigBindingError``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Optional, TypeVar, get_args, get_origin

from ..data_model.config_settings import ConfigSettings, resolve_settings
from ..data_model.entities import (
    ConfigContent,
    ConfigHeader,
    ConfigSection,
    ConfigValue,
)
from ..data_model.interfaces import ICustomParser
from ..exceptions import ConfigBindingError, CustomParserError
from ..utilities.converters_scalar import CultureLike, is_supported_type, to_text, try_convert
from ..utilities.core_util import unwrap_optional
from ..utilities.culture import get_culture
from .descriptors import (
    SectionDescriptor,
    ValueDescriptor,
    header_attribute,
    parse_sections,
)

log = logging.getLogger(__name__)

T = TypeVar("T")

_UNDECLARED = object()


def _construct(cls: Any) -> Any:
    if not callable(cls):
        raise ConfigBindingError(f"Type {cls!r} cannot be constructed.")
    try:
        return cls()
    except Exception as e:
        name = getattr(cls, "__name__", repr(cls))
        raise ConfigBindingError(f'Could not use standard constructor of type "{name}".') from e


def _declared_parser_type(parser_type: type) -> object:
    """The ``T`` of an explicit ``ICustomParser[T]`` base, else ``_UNDECLARED``."""
    for klass in parser_type.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if get_origin(base) is ICustomParser:
                args = get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    return args[0]
    return _UNDECLARED


def _find_section(content: ConfigContent, descriptor: SectionDescriptor) -> Optional[ConfigSection]:
    return next((s for s in content if descriptor.matches(s.title)), None)


def _find_value(section: ConfigSection, descriptor: ValueDescriptor) -> Optional[ConfigValue]:
    return next((v for v in section if descriptor.matches(v.label)), None)


class ConfigBinder(Generic[T]):
    def __init__(
        self,
        target_type: type[T],
        culture: CultureLike = None,
        settings: Optional[ConfigSettings] = None,
    ) -> None:
        if target_type is None:
            raise TypeError("Target type must not be None.")
        self._target_type = target_type
        self._culture = get_culture(culture)
        self._settings = resolve_settings(settings)
        self._sections = parse_sections(target_type)

    @property
    def sections(self) -> list[SectionDescriptor]:
        return list(self._sections)

    # region Custom parsers

    def _create_parser(self, descriptor: ValueDescriptor) -> Optional[ICustomParser[Any]]:
        parser_type = descriptor.parser
        if not isinstance(parser_type, type) or not issubclass(parser_type, ICustomParser):
            log.debug("Parser of value %r is not a custom parser type.", descriptor.name)
            return None
        declared = _declared_parser_type(parser_type)
        if declared is not _UNDECLARED and declared != descriptor.field_type:
            log.debug(
                "Parser %s of value %r handles %r, not %r.",
                parser_type.__name__,
                descriptor.name,
                declared,
                descriptor.field_type,
            )
            return None
        try:
            return parser_type()
        except Exception as e:
            log.debug("Parser %s could not be created: %s", parser_type.__name__, e)
            return None

    @staticmethod
    def _invoke(method: Callable[..., Any], descriptor: ValueDescriptor, value: Any, *args: Any) -> Any:
        try:
            return method(descriptor.name, value, descriptor.fallback, *args)
        except CustomParserError:
            raise
        except Exception as e:
            raise ConfigBindingError(
                f"Custom parser failed for value {descriptor.name!r}: {e}"
            ) from e

    # endregion Custom parsers

    # region Document to object

    def to_instance(self, content: ConfigContent) -> T:
        """Build a new ``target_type`` instance from ``content``."""
        if content is None:
            raise TypeError("Content must not be None.")
        instance = _construct(self._target_type)
        for descriptor in self._sections:
            section = _find_section(content, descriptor)
            if section is None:
                log.debug("Section %r not found.", descriptor.name)
                continue
            section_type, _ = unwrap_optional(descriptor.field_type)
            target = _construct(section_type)
            for value_descriptor in descriptor.values:
                self._assign_value(target, section, value_descriptor)
            setattr(instance, descriptor.field_name, target)
        return instance

    def _assign_value(self, target: Any, section: ConfigSection, descriptor: ValueDescriptor) -> None:
        value = _find_value(section, descriptor)
        if value is None:
            log.debug("Value %r not found in section %r.", descriptor.name, section.title)
            return

        if descriptor.parser is not None:
            parser = self._create_parser(descriptor)
            if parser is None:
                return
            result = self._invoke(parser.parse_from_text, descriptor, value.value, self._culture)
            setattr(target, descriptor.field_name, result)
            return

        if not is_supported_type(descriptor.field_type):
            log.debug("Type of value %r is not supported.", descriptor.name)
            return
        outcome = try_convert(value.value, descriptor.field_type, self._culture)
        if not outcome.success:
            log.debug("Value %r could not be converted: %s", descriptor.name, outcome.error)
            return
        setattr(target, descriptor.field_name, outcome.value)

    # endregion Document to object

    # region Object to document

    def to_content(self, instance: T) -> ConfigContent:
        """Project ``instance`` onto a new ``ConfigContent``."""
        if instance is None:
            raise TypeError("Instance must not be None.")
        content = ConfigContent(settings=self._settings)

        header = header_attribute(type(instance))
        if header is not None:
            factory = ConfigHeader.create_default if header.extended else ConfigHeader.create_standard
            content.header = factory(header.title, header.placeholders, self._settings)

        for descriptor in self._sections:
            section = ConfigSection(descriptor.name, descriptor.comment, settings=self._settings)
            source = getattr(instance, descriptor.field_name, None)
            if source is not None:
                for value_descriptor in descriptor.values:
                    section.append(self._create_value(source, value_descriptor))
            content.append(section)
        return content

    def _value_text(self, source: Any, descriptor: ValueDescriptor) -> str:
        current = getattr(source, descriptor.field_name, None)
        if descriptor.parser is not None:
            parser = self._create_parser(descriptor)
            if parser is not None:
                text = self._invoke(parser.parse_into_text, descriptor, current, self._culture)
                return "" if text is None else str(text)
        if current is None:
            return to_text(descriptor.fallback, self._culture)
        return to_text(current, self._culture)

    def _create_value(self, source: Any, descriptor: ValueDescriptor) -> ConfigValue:
        return ConfigValue(
            descriptor.name,
            self._value_text(source, descriptor),
            comment=descriptor.comment,
            settings=self._settings,
        )

    # endregion Object to document


def to_instance(
    target_type: type[T], content: ConfigContent, culture: CultureLike = None
) -> T:
    return ConfigBinder(target_type, culture).to_instance(content)


def to_content(
    instance: Any, culture: CultureLike = None, settings: Optional[ConfigSettings] = None
) -> ConfigContent:
    if instance is None:
        raise TypeError("Instance must not be None.")
    return ConfigBinder(type(instance), culture, settings).to_content(instance)
