from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
from ..model.member import CompiledMember, MemberRepository
from .attribute_walker import AttributeSuggestionWalker
from .score_table import ReasonScoreTable
from .suggestion import Suggestion
logger = logging.getLogger(__name__)

@dataclass
class ReportConfig:
    score_table: Optional[ReasonScoreTable] = None
    repository: Optional[MemberRepository] = None
    max_workers: int = 1
    min_score: int = 0
    limit: Optional[int] = None

def _suggest_for_member(member: CompiledMember, config: ReportConfig) -> List[Suggestion]:
    walker = AttributeSuggestionWalker(config.score_table, repository=config.repository)
    return walker.visit(member)

def collect_suggestions(members: Iterable[CompiledMember], config: Optional[ReportConfig]=None) -> List[Suggestion]:
    config = config or ReportConfig()
    member_list = [m for m in members if m.is_compiled]
    if config.max_workers > 1 and len(member_list) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            per_member = list(executor.map(lambda m: _suggest_for_member(m, config), member_list))
    else:
        per_member = [_suggest_for_member(m, config) for m in member_list]
    merged: List[Suggestion] = []
    for suggestions in per_member:
        merged.extend((s for s in suggestions if s.score >= config.min_score))
    merged.sort(key=lambda s: s.score, reverse=True)
    logger.info('Collected %d suggestions from %d compiled members', len(merged), len(member_list))
    if config.limit is not None:
        return merged[:max(0, config.limit)]
    return merged

def describe_member(member: Optional[CompiledMember]) -> str:
    if member is None:
        return '<unresolved>'
    return str(member)

def format_suggestion(suggestion: Suggestion) -> str:
    header = f'[{suggestion.category.value.upper()}] score={suggestion.score} bci={suggestion.bytecode_offset} in {describe_member(suggestion.member)}'
    body = '\n'.join((f'    {line}' for line in suggestion.text.rstrip('\n').splitlines()))
    return f'{header}\n{body}'

def suggestions_to_records(suggestions: Iterable[Suggestion]) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    for s in suggestions:
        records.append({'member': describe_member(s.member), 'class': s.member.fully_qualified_class_name if s.member else None, 'bytecode_offset': s.bytecode_offset, 'category': s.category.value, 'score': s.score, 'text': s.text})
    return records
__all__ = ['ReportConfig', 'collect_suggestions', 'describe_member', 'format_suggestion', 'suggestions_to_records']
