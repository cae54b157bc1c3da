from __future__ import annotations
import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Mapping, Optional
from ..journal import visit_parse_tags_of_last_task
from ..model.errors import LogParseError
from ..model.member import CompiledMember, MemberRepository
from ..model.parse_dictionary import ParseDictionary, lookup_member
from ..model.tag import Tag
from .score_table import DEFAULT_SCORE_TABLE, REASON_UNCERTAIN_BRANCH, ReasonScoreTable
from .suggestion import Suggestion, SuggestionSink, SuggestionType
logger = logging.getLogger(__name__)
ATTR_ID = 'id'
ATTR_BCI = 'bci'
ATTR_METHOD = 'method'
ATTR_REASON = 'reason'
ATTR_BYTES = 'bytes'
ATTR_IICOUNT = 'iicount'
ATTR_BRANCH_COUNT = 'cnt'
ATTR_BRANCH_PROB = 'prob'
NEVER = 'never'
ALWAYS = 'always'
MIN_BRANCH_INVOCATIONS = 1000
MIN_INLINING_INVOCATIONS = 1000
UNCERTAIN_BRANCH_LOW = 0.45
UNCERTAIN_BRANCH_HIGH = 0.55
NO_BYTECODE = -1
MemberResolver = Callable[[Optional[str], ParseDictionary], Optional[CompiledMember]]

class TagKind(Enum):
    METHOD = 'method'
    BYTECODE = 'bc'
    BRANCH = 'branch'
    CALL = 'call'
    INLINE_FAIL = 'inline_fail'
    PARSE = 'parse'
    OTHER = ''

    @classmethod
    def of(cls, tag: Tag) -> 'TagKind':
        return _KINDS_BY_NAME.get(tag.name, cls.OTHER)
_KINDS_BY_NAME: Mapping[str, TagKind] = {kind.value: kind for kind in TagKind if kind is not TagKind.OTHER}

@dataclass(frozen=True)
class WalkContext:
    caller: Optional[CompiledMember]
    method_id: Optional[str] = None
    bytecode_offset: int = NO_BYTECODE

class AttributeSuggestionWalker:

    def __init__(self, score_table: Optional[ReasonScoreTable]=None, *, repository: Optional[MemberRepository]=None, resolver: Optional[MemberResolver]=None) -> None:
        self.score_table = score_table or DEFAULT_SCORE_TABLE
        self.repository = repository
        self._resolver = resolver
        self._member: Optional[CompiledMember] = None
        self._sink = SuggestionSink()

    @property
    def member(self) -> Optional[CompiledMember]:
        return self._member

    @property
    def suggestions(self) -> List[Suggestion]:
        return self._sink.to_list()

    def reset(self, member: Optional[CompiledMember]=None) -> None:
        self._member = member
        self._sink = SuggestionSink()

    def visit(self, member: CompiledMember) -> List[Suggestion]:
        self.reset(member)
        if not member.is_compiled:
            logger.debug('Skipping %s: not compiled', member)
            return self.suggestions
        try:
            visit_parse_tags_of_last_task(member, self)
        except LogParseError as exc:
            logger.error('Error building suggestions for %s: %s', member, exc, exc_info=True)
        return self.suggestions

    def visit_parse_tag(self, parse_tag: Tag, parse_dictionary: ParseDictionary) -> None:
        self._process_parse_tag(parse_tag, WalkContext(caller=self._member), parse_dictionary)

    def _resolve(self, method_id: Optional[str], parse_dictionary: ParseDictionary) -> Optional[CompiledMember]:
        if self._resolver is not None:
            return self._resolver(method_id, parse_dictionary)
        return lookup_member(method_id, parse_dictionary, self.repository)

    def _process_parse_tag(self, parse_tag: Tag, context: WalkContext, parse_dictionary: ParseDictionary) -> None:
        for child in parse_tag.children:
            context = self._step(context, child, parse_dictionary)

    def _step(self, context: WalkContext, child: Tag, parse_dictionary: ParseDictionary) -> WalkContext:
        kind = TagKind.of(child)
        if kind is TagKind.METHOD:
            return replace(context, method_id=child.get_attribute(ATTR_ID))
        if kind is TagKind.BYTECODE:
            return replace(context, bytecode_offset=self._parse_bci(child))
        if kind is TagKind.BRANCH:
            self._handle_branch_tag(child.attributes, context)
        elif kind is TagKind.CALL:
            return replace(context, method_id=child.get_attribute(ATTR_METHOD))
        elif kind is TagKind.INLINE_FAIL:
            self._handle_inline_fail_tag(child.attributes, context, parse_dictionary)
        elif kind is TagKind.PARSE:
            nested_caller = self._resolve(child.get_attribute(ATTR_METHOD), parse_dictionary)
            if nested_caller is None:
                logger.debug('Nested parse for method id %s has no resolvable caller', child.get_attribute(ATTR_METHOD))
            self._process_parse_tag(child, WalkContext(caller=nested_caller), parse_dictionary)
        return context

    @staticmethod
    def _parse_bci(tag: Tag) -> int:
        bci = tag.get_attribute(ATTR_BCI)
        try:
            return int(bci)
        except (TypeError, ValueError) as exc:
            raise LogParseError(f'Invalid bytecode index {bci!r} in <{tag.name}> tag', cause=exc) from exc

    def _add(self, suggestion: Suggestion) -> None:
        self._sink.add(suggestion)

    def _handle_inline_fail_tag(self, attrs: Mapping[str, str], context: WalkContext, parse_dictionary: ParseDictionary) -> None:
        method_id = context.method_id
        callee = self._resolve(method_id, parse_dictionary)
        if callee is None:
            return
        method_tag = parse_dictionary.get_method(method_id)
        if method_tag is None:
            return
        method_bytecodes = method_tag.get_attribute(ATTR_BYTES)
        invocations = method_tag.get_attribute(ATTR_IICOUNT)
        if invocations is None:
            logger.warning('Invocation count missing for methodID: %s', method_id)
            return
        try:
            invocation_count = int(invocations)
        except ValueError:
            logger.warning('Unparsable invocation count %r for methodID: %s', invocations, method_id)
            return
        if invocation_count < MIN_INLINING_INVOCATIONS:
            return
        reason = attrs.get(ATTR_REASON)
        if not self.score_table.is_known(reason):
            logger.info('No score is set for reason: %s', reason)
        score = self.score_table.weight(reason) * invocation_count
        if score <= 0:
            return
        lines = [f'The call at bytecode {context.bytecode_offset} to', f'Class: {callee.fully_qualified_class_name}', f'Member: {callee.to_unqualified_string()}', f"was not inlined for reason: '{reason}'"]
        explanation = self.score_table.explanation(reason)
        if explanation:
            lines.append(explanation)
        lines.append(f'Invocations: {invocation_count}')
        lines.append(f'Size of callee bytecode: {method_bytecodes}')
        text = '\n'.join(lines) + '\n'
        self._add(Suggestion(context.caller, context.bytecode_offset, text, SuggestionType.INLINING, int(math.ceil(score))))

    def _handle_branch_tag(self, attrs: Mapping[str, str], context: WalkContext) -> None:
        count = _parse_branch_count(attrs.get(ATTR_BRANCH_COUNT))
        probability = _parse_branch_probability(attrs.get(ATTR_BRANCH_PROB))
        if not (UNCERTAIN_BRANCH_LOW < probability < UNCERTAIN_BRANCH_HIGH and count >= MIN_BRANCH_INVOCATIONS):
            return
        score = self.score_table.weight(REASON_UNCERTAIN_BRANCH) * count
        if score <= 0:
            return
        text = f'Method contains an unpredictable branch at bytecode {context.bytecode_offset} that was observed {count} times and is taken with probability {probability}. It may be possible to modify the branch (for example by sorting a Collection before iterating) to make it more predictable.'
        self._add(Suggestion(context.caller, context.bytecode_offset, text, SuggestionType.BRANCH, int(math.ceil(score))))

def _parse_branch_count(raw: Optional[str]) -> int:
    if raw is None:
        return 0
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        logger.error("Couldn't parse branch tag attribute %s", raw)
        return 0

def _parse_branch_probability(raw: Optional[str]) -> float:
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except ValueError:
        lowered = raw.strip().lower()
        if lowered == NEVER:
            return 0.0
        if lowered == ALWAYS:
            return 1.0
        logger.error('Unrecognised branch probability: %s', raw)
        return 0.0
__all__ = ['AttributeSuggestionWalker', 'TagKind', 'WalkContext']
