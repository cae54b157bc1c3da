from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional
from ..model.member import CompiledMember

class SuggestionType(Enum):
    INLINING = 'inlining'
    BRANCH = 'branch'

@dataclass(frozen=True)
class Suggestion:
    member: Optional[CompiledMember]
    bytecode_offset: int
    text: str
    category: SuggestionType
    score: int

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f'Suggestion score must be non-negative, got {self.score}')

class SuggestionSink:

    def __init__(self) -> None:
        self._items: List[Suggestion] = []
        self._seen: set[Suggestion] = set()

    def add(self, suggestion: Suggestion) -> bool:
        if suggestion in self._seen:
            return False
        self._seen.add(suggestion)
        self._items.append(suggestion)
        return True

    def __contains__(self, suggestion: object) -> bool:
        return suggestion in self._seen

    def __iter__(self) -> Iterator[Suggestion]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[Suggestion]:
        return list(self._items)
__all__ = ['Suggestion', 'SuggestionSink', 'SuggestionType']
