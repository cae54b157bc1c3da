from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
from .errors import LogParseError
from .tag import Tag
logger = logging.getLogger(__name__)
CONSTRUCTOR_NAME = '<init>'
_PRIMITIVE_DESCRIPTORS: Dict[str, str] = {'B': 'byte', 'C': 'char', 'D': 'double', 'F': 'float', 'I': 'int', 'J': 'long', 'S': 'short', 'Z': 'boolean', 'V': 'void'}

def _read_descriptor(descriptor: str, pos: int) -> Tuple[str, int]:
    dims = 0
    while pos < len(descriptor) and descriptor[pos] == '[':
        dims += 1
        pos += 1
    if pos >= len(descriptor):
        raise ValueError(f'Truncated type descriptor: {descriptor!r}')
    ch = descriptor[pos]
    if ch == 'L':
        end = descriptor.find(';', pos)
        if end < 0:
            raise ValueError(f'Unterminated class descriptor: {descriptor!r}')
        base = descriptor[pos + 1:end].replace('/', '.')
        pos = end + 1
    elif ch in _PRIMITIVE_DESCRIPTORS:
        base = _PRIMITIVE_DESCRIPTORS[ch]
        pos += 1
    else:
        raise ValueError(f'Unknown type descriptor {ch!r} in {descriptor!r}')
    return (base + '[]' * dims, pos)

def descriptor_to_type_name(descriptor: str) -> str:
    name, end = _read_descriptor(descriptor, 0)
    if end != len(descriptor):
        raise ValueError(f'Trailing characters in type descriptor: {descriptor!r}')
    return name

def klass_name_to_java(raw: str) -> str:
    name = (raw or '').strip()
    if name.startswith('['):
        return descriptor_to_type_name(name)
    return name.replace('/', '.')

def parse_method_descriptor(descriptor: str) -> Tuple[List[str], str]:
    if not descriptor.startswith('('):
        raise ValueError(f"Method descriptor must start with '(': {descriptor!r}")
    close = descriptor.find(')')
    if close < 0:
        raise ValueError(f"Method descriptor missing ')': {descriptor!r}")
    params: List[str] = []
    pos = 1
    while pos < close:
        name, pos = _read_descriptor(descriptor, pos)
        params.append(name)
    return (params, descriptor_to_type_name(descriptor[close + 1:]))

@dataclass(frozen=True)
class MetaClass:
    fully_qualified_name: str

    @property
    def package_name(self) -> str:
        pkg, _, _ = self.fully_qualified_name.rpartition('.')
        return pkg

    @property
    def simple_name(self) -> str:
        return self.fully_qualified_name.rpartition('.')[2]

@dataclass(frozen=True)
class CompiledMember:
    meta_class: MetaClass
    name: str
    return_type: str = 'void'
    param_types: Tuple[str, ...] = ()
    is_compiled: bool = field(default=True, compare=False)
    last_task: Optional[Tag] = field(default=None, compare=False, repr=False)

    @property
    def fully_qualified_class_name(self) -> str:
        return self.meta_class.fully_qualified_name

    @property
    def is_constructor(self) -> bool:
        return self.name == CONSTRUCTOR_NAME

    def matches(self, class_name: str, name: str, param_types: Sequence[str]) -> bool:
        return self.fully_qualified_class_name == class_name and self.name == name and (self.param_types == tuple(param_types))

    def to_unqualified_string(self) -> str:
        params = ', '.join(self.param_types)
        if self.is_constructor:
            return f'{self.meta_class.simple_name}({params})'
        return f'{self.return_type} {self.name}({params})'

    def __str__(self) -> str:
        return f'{self.fully_qualified_class_name} {self.to_unqualified_string()}'

def member_from_signature(signature: str, *, last_task: Optional[Tag]=None) -> CompiledMember:
    parts = (signature or '').split()
    if len(parts) != 3:
        raise LogParseError(f'Unrecognised method signature: {signature!r}')
    klass, name, descriptor = parts
    try:
        params, return_type = parse_method_descriptor(descriptor)
        class_name = klass_name_to_java(klass)
    except ValueError as exc:
        raise LogParseError(f'Bad descriptor in method signature {signature!r}', cause=exc) from exc
    return CompiledMember(meta_class=MetaClass(class_name), name=name, return_type=return_type, param_types=tuple(params), is_compiled=last_task is not None, last_task=last_task)

class MemberRepository:

    def __init__(self, members: Optional[Iterable[CompiledMember]]=None) -> None:
        self._by_class: Dict[str, List[CompiledMember]] = {}
        for member in members or []:
            self.register(member)

    def register(self, member: CompiledMember) -> None:
        bucket = self._by_class.setdefault(member.fully_qualified_class_name, [])
        for idx, existing in enumerate(bucket):
            if existing == member:
                bucket[idx] = member
                return
        bucket.append(member)

    def find_member(self, class_name: str, name: str, param_types: Sequence[str]) -> Optional[CompiledMember]:
        for member in self._by_class.get(class_name, []):
            if member.matches(class_name, name, param_types):
                return member
        logger.debug('No member registered for %s.%s(%s)', class_name, name, ', '.join(param_types))
        return None

    def __iter__(self) -> Iterator[CompiledMember]:
        for bucket in self._by_class.values():
            yield from bucket

    def __len__(self) -> int:
        return sum((len(bucket) for bucket in self._by_class.values()))
__all__ = ['CONSTRUCTOR_NAME', 'CompiledMember', 'MemberRepository', 'MetaClass', 'descriptor_to_type_name', 'klass_name_to_java', 'member_from_signature', 'parse_method_descriptor']
