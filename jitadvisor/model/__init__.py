from __future__ import annotations
from typing import TYPE_CHECKING, Any
__all__ = ['CompiledMember', 'JITAdvisorError', 'LogParseError', 'MemberRepository', 'MetaClass', 'ParseDictionary', 'ScoreTableError', 'Tag', 'lookup_member', 'member_from_signature']
if TYPE_CHECKING:
    from .errors import JITAdvisorError, LogParseError, ScoreTableError
    from .member import CompiledMember, MemberRepository, MetaClass, member_from_signature
    from .parse_dictionary import ParseDictionary, lookup_member
    from .tag import Tag
_EXPORTS: dict[str, tuple[str, str]] = {'JITAdvisorError': ('errors', 'JITAdvisorError'), 'LogParseError': ('errors', 'LogParseError'), 'ScoreTableError': ('errors', 'ScoreTableError'), 'CompiledMember': ('member', 'CompiledMember'), 'MemberRepository': ('member', 'MemberRepository'), 'MetaClass': ('member', 'MetaClass'), 'member_from_signature': ('member', 'member_from_signature'), 'ParseDictionary': ('parse_dictionary', 'ParseDictionary'), 'lookup_member': ('parse_dictionary', 'lookup_member'), 'Tag': ('tag', 'Tag')}

def __getattr__(name: str) -> Any:
    entry = _EXPORTS.get(name)
    if entry is None:
        raise AttributeError(name)
    mod_name, attr = entry
    module = __import__(f'{__name__}.{mod_name}', fromlist=[attr])
    return getattr(module, attr)

def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
