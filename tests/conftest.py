from __future__ import annotations

from typing import Iterable, Optional

import pytest

from jitadvisor.model.member import CompiledMember, MetaClass
from jitadvisor.model.parse_dictionary import ParseDictionary
from jitadvisor.model.tag import Tag

CALLER_ID = "30"
HOT_CALLEE_ID = "20"
NO_IICOUNT_ID = "21"
COLD_CALLEE_ID = "22"
WARM_CALLEE_ID = "23"
UNKNOWN_ID = "999"


def tag(name: str, /, *children: Tag, **attrs: str) -> Tag:
    return Tag(name=name, attributes=attrs, children=tuple(children))


def dictionary_tags() -> list:
    return [
        tag("type", id="1", name="void"),
        tag("type", id="2", name="int"),
        tag("klass", id="10", name="com/example/Callee", flags="1"),
        tag("klass", id="11", name="com/example/Caller", flags="1"),
        tag("klass", id="12", name="[Ljava/lang/String;", flags="1041"),
        tag("method", id=HOT_CALLEE_ID, holder="10", name="compute", arguments="2", bytes="120", iicount="5000", **{"return": "2"}),
        tag("method", id=NO_IICOUNT_ID, holder="10", name="noCount", bytes="8", **{"return": "1"}),
        tag("method", id=COLD_CALLEE_ID, holder="10", name="cold", bytes="40", iicount="500", **{"return": "1"}),
        tag("method", id=WARM_CALLEE_ID, holder="10", name="warm", arguments="12", bytes="60", iicount="1500", **{"return": "1"}),
        tag("method", id=CALLER_ID, holder="11", name="run", bytes="300", iicount="20000", **{"return": "1"}),
    ]


def make_parse(children: Iterable[Tag], method: str = CALLER_ID) -> Tag:
    return tag("parse", *children, method=method)


def make_task(parse_children: Iterable[Tag], compile_id: str = "1", signature: str = "com/example/Caller run ()V") -> Tag:
    parse = make_parse([*dictionary_tags(), *parse_children])
    return tag("task", parse, compile_id=compile_id, method=signature)


def make_caller(last_task: Optional[Tag] = None) -> CompiledMember:
    return CompiledMember(meta_class=MetaClass("com.example.Caller"), name="run", return_type="void", param_types=(), is_compiled=True, last_task=last_task)


@pytest.fixture
def parse_dictionary() -> ParseDictionary:
    return ParseDictionary.from_tags(dictionary_tags())


@pytest.fixture
def caller() -> CompiledMember:
    return make_caller()


@pytest.fixture
def hot_callee() -> CompiledMember:
    return CompiledMember(meta_class=MetaClass("com.example.Callee"), name="compute", return_type="int", param_types=("int",))
