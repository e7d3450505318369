"""Key-to-exit-code mapping table.

Parses ``<code>:<key>:<label>`` entries from configuration and appends the
built-in ``q`` (abort) and ``c`` (continue) bindings. The table is built once
and treated as read-only by the runtime.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

MIN_USER_EXIT_CODE = 64
MAX_USER_EXIT_CODE = 113
MAPPING_FORMAT = "<code>:<key>:<label>"

ABORT_KEY = "q"
ABORT_EXIT_CODE = 1
CONTINUE_KEY = "c"
CONTINUE_EXIT_CODE = 0

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class MappingError(ValueError):
    """Base class for rejected raw mapping entries."""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"Invalid mapping '{entry}', {reason}")
        self.entry = entry
        self.reason = reason


class MappingFormatError(MappingError):
    def __init__(self, entry: str) -> None:
        super().__init__(entry, f"format should be {MAPPING_FORMAT}")


class MappingKeyError(MappingError):
    def __init__(self, entry: str) -> None:
        super().__init__(entry, "key should be a single character")


class CodeNotNumericError(MappingError):
    def __init__(self, entry: str) -> None:
        super().__init__(entry, "exit code should be a number")


class CodeOutOfRangeError(MappingError):
    def __init__(self, entry: str, code: int) -> None:
        super().__init__(
            entry,
            f"exit code {code} should be >= {MIN_USER_EXIT_CODE} and <= {MAX_USER_EXIT_CODE}",
        )
        self.code = code


@dataclass(frozen=True)
class KeyMapping:
    """Exit code and legend label bound to one key."""

    exit_code: int
    label: str


class MappingTable(Mapping[str, KeyMapping]):
    """Read-only ``key -> KeyMapping`` lookup with an ordered legend."""

    def __init__(self, entries: Mapping[str, KeyMapping]) -> None:
        self._entries = dict(entries)

    def __getitem__(self, key: str) -> KeyMapping:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MappingTable({dict(self.items())!r})"

    def lookup(self, key: str) -> KeyMapping | None:
        """Return the mapping bound to ``key``, or ``None`` for unbound keys."""
        return self._entries.get(key)

    def legend(self) -> tuple[tuple[str, str], ...]:
        """Return ``(key, label)`` pairs ordered by key for on-screen display."""
        return tuple((key, self._entries[key].label) for key in self)


def parse_mapping_entry(entry: str) -> tuple[str, KeyMapping]:
    """Validate one raw entry and return its ``(key, mapping)`` pair.

    Checks run in a fixed order: field count, key, numeric code, code range.
    A multi-character key field is reduced to its first character.
    """
    fields = entry.split(":")
    if len(fields) != 3:
        raise MappingFormatError(entry)
    raw_code, raw_key, label = fields
    if not raw_key:
        raise MappingKeyError(entry)
    if not _INTEGER_RE.fullmatch(raw_code):
        raise CodeNotNumericError(entry)
    code = int(raw_code)
    if code < MIN_USER_EXIT_CODE or code > MAX_USER_EXIT_CODE:
        raise CodeOutOfRangeError(entry, code)
    return raw_key[0], KeyMapping(exit_code=code, label=label)


def parse_mappings(raw_entries: Iterable[str]) -> MappingTable:
    """Build the mapping table from raw entries plus built-in bindings.

    Entries are applied in input order, so later duplicates win. The built-in
    ``q``/``c`` bindings are inserted last and always override user entries.
    Raises a ``MappingError`` subclass for the first invalid entry; nothing is
    returned in that case.
    """
    entries: dict[str, KeyMapping] = {}
    for entry in raw_entries:
        key, mapping = parse_mapping_entry(entry)
        entries[key] = mapping
    entries[ABORT_KEY] = KeyMapping(exit_code=ABORT_EXIT_CODE, label="abort")
    entries[CONTINUE_KEY] = KeyMapping(exit_code=CONTINUE_EXIT_CODE, label="continue")
    return MappingTable(entries)


__all__ = [
    "ABORT_EXIT_CODE",
    "ABORT_KEY",
    "CONTINUE_EXIT_CODE",
    "CONTINUE_KEY",
    "CodeNotNumericError",
    "CodeOutOfRangeError",
    "KeyMapping",
    "MappingError",
    "MappingFormatError",
    "MappingKeyError",
    "MappingTable",
    "MAX_USER_EXIT_CODE",
    "MIN_USER_EXIT_CODE",
    "parse_mapping_entry",
    "parse_mappings",
]
