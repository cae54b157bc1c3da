from __future__ import annotations
import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
from .member import CompiledMember, MemberRepository, MetaClass, klass_name_to_java
from .tag import Tag
logger = logging.getLogger(__name__)
TAG_TYPE = 'type'
TAG_KLASS = 'klass'
TAG_METHOD = 'method'
ATTR_ID = 'id'
ATTR_NAME = 'name'
ATTR_HOLDER = 'holder'
ATTR_RETURN = 'return'
ATTR_ARGUMENTS = 'arguments'

class ParseDictionary:

    def __init__(self, types: Optional[Mapping[str, Tag]]=None, klasses: Optional[Mapping[str, Tag]]=None, methods: Optional[Mapping[str, Tag]]=None) -> None:
        self._types = MappingProxyType(dict(types or {}))
        self._klasses = MappingProxyType(dict(klasses or {}))
        self._methods = MappingProxyType(dict(methods or {}))

    @classmethod
    def from_tags(cls, tags) -> 'ParseDictionary':
        buckets: Dict[str, Dict[str, Tag]] = {TAG_TYPE: {}, TAG_KLASS: {}, TAG_METHOD: {}}
        for tag in tags:
            bucket = buckets.get(tag.name)
            if bucket is None:
                continue
            tag_id = tag.get_attribute(ATTR_ID)
            if not tag_id:
                logger.debug('Skipping %s tag without id', tag.name)
                continue
            bucket[tag_id] = tag
        return cls(types=buckets[TAG_TYPE], klasses=buckets[TAG_KLASS], methods=buckets[TAG_METHOD])

    def get_type(self, type_id: Optional[str]) -> Optional[Tag]:
        return self._types.get(type_id) if type_id else None

    def get_klass(self, klass_id: Optional[str]) -> Optional[Tag]:
        return self._klasses.get(klass_id) if klass_id else None

    def get_method(self, method_id: Optional[str]) -> Optional[Tag]:
        return self._methods.get(method_id) if method_id else None

    def type_name(self, type_id: Optional[str]) -> Optional[str]:
        tag = self.get_type(type_id) or self.get_klass(type_id)
        if tag is None:
            return None
        raw = tag.get_attribute(ATTR_NAME)
        if raw is None:
            return None
        try:
            return klass_name_to_java(raw)
        except ValueError:
            logger.warning('Unparsable type name %r for id %s', raw, type_id)
            return None

    @property
    def method_ids(self) -> List[str]:
        return list(self._methods.keys())

    def __len__(self) -> int:
        return len(self._types) + len(self._klasses) + len(self._methods)

def lookup_member(method_id: Optional[str], parse_dictionary: ParseDictionary, repository: Optional[MemberRepository]=None) -> Optional[CompiledMember]:
    if not method_id:
        return None
    method_tag = parse_dictionary.get_method(method_id)
    if method_tag is None:
        logger.debug('Method id %s not present in parse dictionary', method_id)
        return None
    holder_id = method_tag.get_attribute(ATTR_HOLDER)
    klass_tag = parse_dictionary.get_klass(holder_id)
    holder_name = klass_tag.get_attribute(ATTR_NAME) if klass_tag is not None else None
    if not holder_name:
        logger.debug('Holder klass %s for method id %s not resolvable', holder_id, method_id)
        return None
    try:
        class_name = klass_name_to_java(holder_name)
    except ValueError:
        logger.warning('Unparsable holder name %r for method id %s', holder_name, method_id)
        return None
    name = method_tag.get_attribute(ATTR_NAME)
    if not name:
        return None
    return_type = parse_dictionary.type_name(method_tag.get_attribute(ATTR_RETURN)) or 'void'
    param_types: List[str] = []
    for arg_id in (method_tag.get_attribute(ATTR_ARGUMENTS) or '').split():
        arg_name = parse_dictionary.type_name(arg_id)
        if arg_name is None:
            logger.debug('Argument type %s of method id %s not resolvable', arg_id, method_id)
            return None
        param_types.append(arg_name)
    if repository is not None:
        return repository.find_member(class_name, name, param_types)
    return CompiledMember(meta_class=MetaClass(class_name), name=name, return_type=return_type, param_types=tuple(param_types))
__all__ = ['ParseDictionary', 'lookup_member']
