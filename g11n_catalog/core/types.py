"""Core catalog types: entries, tables and key splitting."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, Union

TranslationValue = Union[str, Sequence[str], Mapping[str, str]]
EntryKey = tuple[str, Optional[str]]

CONTEXT_DELIMITER = "|"


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    translated: TranslationValue
    context: Optional[str] = None

    @property
    def key(self) -> EntryKey:
        return (self.id, self.context)


def split_key(raw: str) -> EntryKey:
    """Split a raw catalog key into ``(id, context)`` on the first delimiter.

    An empty context (``"greeting|"``) is the same as no context.
    """
    if CONTEXT_DELIMITER in raw:
        id_, context = raw.split(CONTEXT_DELIMITER, 1)
        return id_, context or None
    return raw, None


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def merge_translated(current: TranslationValue, incoming: TranslationValue) -> TranslationValue:
    """Combine two translated values; incoming items win.

    Plural forms given as sequences are combined position by position and
    mappings key by key, so a later catalog may override single forms. Any
    other combination is a plain replacement.
    """
    if _is_sequence(current) and _is_sequence(incoming):
        merged = list(incoming)
        merged.extend(current[len(incoming):])
        return tuple(merged)
    if isinstance(current, Mapping) and isinstance(incoming, Mapping):
        return {**current, **incoming}
    return incoming


class CatalogTable(Mapping[EntryKey, CatalogEntry]):
    """Translation table keyed by ``(id, context)``."""

    def __init__(self, entries: Optional[Sequence[CatalogEntry]] = None) -> None:
        self._entries: dict[EntryKey, CatalogEntry] = {}
        for entry in entries or ():
            self.merge(entry)

    def merge(self, entry: CatalogEntry) -> CatalogEntry:
        existing = self._entries.get(entry.key)
        if existing is not None:
            entry = CatalogEntry(
                id=entry.id,
                context=entry.context,
                translated=merge_translated(existing.translated, entry.translated),
            )
        self._entries[entry.key] = entry
        return entry

    def lookup(self, id: str, context: Optional[str] = None) -> Optional[CatalogEntry]:
        return self._entries.get((id, context))

    def entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def __getitem__(self, key: EntryKey) -> CatalogEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[EntryKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CatalogTable({self.entries()!r})"
