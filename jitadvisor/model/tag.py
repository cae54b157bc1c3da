from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

@dataclass(frozen=True, eq=False)
class Tag:
    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple['Tag', ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'attributes', MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, 'children', tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.name, tuple(sorted(self.attributes.items())), self.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name and dict(self.attributes) == dict(other.attributes) and (self.children == other.children)

    def get_attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)

    def named_children(self, name: str) -> Iterator['Tag']:
        for child in self.children:
            if child.name == name:
                yield child

    def first_named_child(self, name: str) -> Optional['Tag']:
        return next(self.named_children(name), None)

    def iter_descendants(self) -> Iterator['Tag']:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def __repr__(self) -> str:
        attrs = ' '.join((f"{k}='{v}'" for k, v in self.attributes.items()))
        head = f'<{self.name} {attrs}>' if attrs else f'<{self.name}>'
        return f'Tag({head}, children={len(self.children)})'
__all__ = ['Tag']
