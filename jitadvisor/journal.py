from __future__ import annotations
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Union
from .model.errors import LogParseError
from .model.member import CompiledMember, member_from_signature
from .model.parse_dictionary import ParseDictionary
from .model.tag import Tag
if TYPE_CHECKING:
    from typing import Protocol

    class ParseTagVisitor(Protocol):

        def visit_parse_tag(self, parse_tag: Tag, parse_dictionary: ParseDictionary) -> None:
            ...
logger = logging.getLogger(__name__)
TAG_TASK = 'task'
TAG_PHASE = 'phase'
TAG_PARSE = 'parse'
ATTR_COMPILE_ID = 'compile_id'
ATTR_METHOD = 'method'
ATTR_NAME = 'name'
PHASE_PARSE = 'parse'
PHASE_BUILD_IR = 'buildIR'
PARSE_PHASES = frozenset({PHASE_PARSE, PHASE_BUILD_IR})
_XML_DECL_RE = re.compile('^\\s*<\\?xml[^>]*\\?>', re.IGNORECASE)

def _element_to_tag(element: ET.Element) -> Tag:
    return Tag(name=element.tag, attributes=dict(element.attrib), children=tuple((_element_to_tag(child) for child in element)))

def parse_tag_tree(text: str) -> Tag:
    if not text or not text.strip():
        raise LogParseError('Empty compilation log')
    try:
        return _element_to_tag(ET.fromstring(text))
    except ET.ParseError as first_error:
        body = _XML_DECL_RE.sub('', text, count=1)
        try:
            return _element_to_tag(ET.fromstring(f'<journal>{body}</journal>'))
        except ET.ParseError:
            raise LogParseError(f'Malformed compilation log: {first_error}', cause=first_error) from first_error

def build_parse_dictionary(task_tag: Tag) -> ParseDictionary:
    return ParseDictionary.from_tags(task_tag.iter_descendants())

def iter_parse_tags(task_tag: Tag) -> Iterator[Tag]:
    for child in task_tag.children:
        if child.name == TAG_PARSE:
            yield child
        elif child.name == TAG_PHASE and child.get_attribute(ATTR_NAME) in PARSE_PHASES:
            yield from child.named_children(TAG_PARSE)

def iter_tasks(root: Tag) -> Iterator[Tag]:
    if root.name == TAG_TASK:
        yield root
        return
    for tag in root.iter_descendants():
        if tag.name == TAG_TASK:
            yield tag

def visit_parse_tags_of_last_task(member: CompiledMember, visitor: 'ParseTagVisitor') -> None:
    task = member.last_task
    if task is None:
        logger.warning('No compilation task recorded for %s', member)
        return
    parse_tags = list(iter_parse_tags(task))
    if not parse_tags:
        raise LogParseError(f'No parse tag found in last task of {member} (compile_id={task.get_attribute(ATTR_COMPILE_ID)})')
    parse_dictionary = build_parse_dictionary(task)
    for parse_tag in parse_tags:
        visitor.visit_parse_tag(parse_tag, parse_dictionary)

def load_journal(path: Union[str, Path]) -> Dict[str, Tag]:
    path_obj = Path(path)
    try:
        text = path_obj.read_text(encoding='utf-8', errors='replace')
    except OSError as exc:
        raise LogParseError(f'Unable to read compilation log: {exc}', source=path_obj, cause=exc) from exc
    try:
        root = parse_tag_tree(text)
    except LogParseError as exc:
        raise LogParseError(str(exc), source=path_obj, cause=exc.cause) from exc
    tasks: Dict[str, Tag] = {}
    for index, task in enumerate(iter_tasks(root)):
        compile_id = task.get_attribute(ATTR_COMPILE_ID) or f'#{index}'
        tasks[compile_id] = task
    logger.info('Loaded %d compilation tasks from %s', len(tasks), path_obj)
    return tasks

def members_from_tasks(tasks: Iterable[Tag]) -> List[CompiledMember]:
    last_by_signature: Dict[str, Tag] = {}
    for task in tasks:
        signature = task.get_attribute(ATTR_METHOD)
        if not signature:
            logger.debug('Skipping task %s without method attribute', task.get_attribute(ATTR_COMPILE_ID))
            continue
        last_by_signature.pop(signature, None)
        last_by_signature[signature] = task
    members: List[CompiledMember] = []
    for signature, task in last_by_signature.items():
        try:
            members.append(member_from_signature(signature, last_task=task))
        except LogParseError as exc:
            logger.warning('Skipping task %s: %s', task.get_attribute(ATTR_COMPILE_ID), exc)
    return members
__all__ = ['build_parse_dictionary', 'iter_parse_tags', 'iter_tasks', 'load_journal', 'members_from_tasks', 'parse_tag_tree', 'visit_parse_tags_of_last_task']
