# config_helper/data_model/interfaces/i_parser_emitter.py
"""
Generic, runtime-checkable protocol for bidirectional text ↔ object converters.

This protocol models a *pair* of operations over the configuration text
format: a **parser** that converts a complete document into a domain object,
and an **emitter** that serializes such an object back to text.

### Expectations for implementers

- **Determinism:** Given the same input string, ``parse`` must produce an
  equivalent object. Given the same object, ``emit`` must produce the same text.
- **Canonical round trip:** ``emit(parse(s))`` is the canonical form of ``s``;
  parsing that again and emitting it is byte-for-byte stable.
- **Errors:** On unrecoverable format errors, raise ``ValueError`` (or a
  documented subclass such as ``ConfigFormatError``).

Note: This is a **structural** type (``typing.Protocol``). Any class with
matching methods is considered compatible without explicit inheritance.
"""

from __future__ import annotations

from typing import TypeVar

from typing_extensions import Protocol, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class IParserEmitter(Protocol[T]):
    def parse(self, unparsed_string: str) -> T:
        """
        Parse a complete textual document.

        Parameters
        ----------
        unparsed_string : str
            The full contents of the source document. Line endings ``\\n``,
            ``\\r\\n`` and ``\\r`` are treated equivalently.

        Raises
        ------
        ValueError
            If the input cannot be parsed due to malformed content.
        """
        ...

    def emit(self, item: T) -> str:
        """Serialize ``item`` into a single textual document."""
        ...
