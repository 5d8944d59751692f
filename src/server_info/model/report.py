"""Report model dataclasses - The structure produced by one collection pass.

A Report is an ordered sequence of Groups, each Group an ordered mapping of
Facts. Reports are built fresh per request and never mutated afterwards.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

FactValue = Union[str, Mapping[str, str], None]


@dataclass(frozen=True)
class Fact:
    """A single named piece of diagnostic information."""

    label: str
    value: FactValue
    sensitive: bool = False  # Credential-like, redactable at render time

    def __post_init__(self) -> None:
        if isinstance(self.value, Mapping):
            object.__setattr__(self, "value", MappingProxyType(dict(self.value)))

    @property
    def is_mapping(self) -> bool:
        """True when the value is a set of named sub-entries."""
        return isinstance(self.value, Mapping)

    def to_dict(self, redact_sensitive: bool = False, redacted: str = "[redacted]") -> dict[str, Any]:
        value: Any = self.value
        if self.sensitive and redact_sensitive:
            value = redacted
        elif self.is_mapping:
            value = dict(self.value)  # type: ignore[arg-type]
        return {"label": self.label, "value": value, "sensitive": self.sensitive}


@dataclass(frozen=True)
class Group:
    """A labeled collection of related facts.

    Field insertion order is display order. An empty group is valid and is
    skipped by renderers.
    """

    key: str
    label: str
    fields: Mapping[str, Fact] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def is_empty(self) -> bool:
        return not self.fields

    def get(self, key: str) -> Fact | None:
        return self.fields.get(key)


@dataclass(frozen=True)
class Report:
    """Ordered collection of groups from one collection pass."""

    groups: tuple[Group, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def group(self, key: str) -> Group | None:
        """Look up a group by its stable key."""
        for group in self.groups:
            if group.key == key:
                return group
        return None

    def fact(self, group_key: str, field_key: str) -> Fact | None:
        """Look up a single fact, or None if the group or field is absent."""
        group = self.group(group_key)
        if group is None:
            return None
        return group.get(field_key)

    def to_dict(self, redact_sensitive: bool = False, redacted: str = "[redacted]") -> list[dict[str, Any]]:
        """Convert to a JSON-ready list of groups."""
        return [
            {
                "key": group.key,
                "label": group.label,
                "fields": {
                    key: fact.to_dict(redact_sensitive=redact_sensitive, redacted=redacted)
                    for key, fact in group.fields.items()
                },
            }
            for group in self.groups
        ]
