from __future__ import annotations
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
from ..model.errors import ScoreTableError
REASON_HOT_METHOD_TOO_BIG = 'hot method too big'
REASON_TOO_BIG = 'too big'
REASON_ALREADY_COMPILED_INTO_A_BIG_METHOD = 'already compiled into a big method'
REASON_ALREADY_COMPILED_INTO_A_MEDIUM_METHOD = 'already compiled into a medium method'
REASON_NEVER_EXECUTED = 'never executed'
REASON_EXEC_LESS_MIN_INLINING_THRESHOLD = 'executed < MinInliningThreshold times'
REASON_CALL_SITE_NOT_REACHED = 'call site not reached'
REASON_UNCERTAIN_BRANCH = 'Uncertain branch'
REASON_NATIVE_METHOD = 'native method'
REASON_CALLEE_IS_TOO_LARGE = 'callee is too large'
REASON_NO_STATIC_BINDING = 'no static binding'
_DEFAULT_WEIGHTS: Dict[str, float] = {REASON_HOT_METHOD_TOO_BIG: 1.0, REASON_CALLEE_IS_TOO_LARGE: 0.5, REASON_UNCERTAIN_BRANCH: 0.5, REASON_TOO_BIG: 0.5, REASON_ALREADY_COMPILED_INTO_A_BIG_METHOD: 0.4, REASON_ALREADY_COMPILED_INTO_A_MEDIUM_METHOD: 0.4, REASON_EXEC_LESS_MIN_INLINING_THRESHOLD: 0.2, REASON_NO_STATIC_BINDING: 0.2, REASON_NEVER_EXECUTED: 0.0, REASON_NATIVE_METHOD: 0.0, REASON_CALL_SITE_NOT_REACHED: 0.0}
_DEFAULT_EXPLANATIONS: Dict[str, str] = {REASON_HOT_METHOD_TOO_BIG: "The callee method is 'hot' but is too big to be inlined into the caller.\nYou may want to consider refactoring the callee into smaller methods.", REASON_TOO_BIG: "The callee method is not 'hot' but is too big to be inlined into the caller method.", REASON_ALREADY_COMPILED_INTO_A_BIG_METHOD: "The callee method is not 'hot' but is too big to be inlined into the caller method.", REASON_EXEC_LESS_MIN_INLINING_THRESHOLD: 'The callee method was not called enough times to be inlined.', REASON_CALLEE_IS_TOO_LARGE: 'The callee method is greater than the max inlining size at the C1 compiler level.', REASON_NO_STATIC_BINDING: 'The callee is known but there is no static binding so could not be inlined.'}

def _coerce_weight(reason: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ScoreTableError(f'Weight for {reason!r} must be numeric, got {value!r}', reason=reason)
    try:
        weight = float(value)
    except (TypeError, ValueError) as exc:
        raise ScoreTableError(f'Weight for {reason!r} must be numeric, got {value!r}', reason=reason) from exc
    if math.isnan(weight) or weight < 0.0 or weight > 1.0:
        raise ScoreTableError(f'Weight for {reason!r} must be within [0, 1], got {weight}', reason=reason)
    return weight

@dataclass(frozen=True)
class ReasonScoreTable:
    weights: Mapping[str, float] = field(default_factory=dict)
    explanations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked = {str(reason): _coerce_weight(str(reason), value) for reason, value in dict(self.weights).items()}
        object.__setattr__(self, 'weights', MappingProxyType(checked))
        object.__setattr__(self, 'explanations', MappingProxyType({str(k): str(v) for k, v in dict(self.explanations).items()}))

    def is_known(self, reason: Optional[str]) -> bool:
        return reason is not None and reason in self.weights

    def weight(self, reason: Optional[str]) -> float:
        if reason is None:
            return 0.0
        return self.weights.get(reason, 0.0)

    def explanation(self, reason: Optional[str]) -> Optional[str]:
        if reason is None:
            return None
        return self.explanations.get(reason)

    def merged(self, weights: Optional[Mapping[str, Any]]=None, explanations: Optional[Mapping[str, Any]]=None) -> 'ReasonScoreTable':
        new_weights = dict(self.weights)
        new_weights.update(weights or {})
        new_explanations = dict(self.explanations)
        new_explanations.update(explanations or {})
        return ReasonScoreTable(weights=new_weights, explanations=new_explanations)
DEFAULT_SCORE_TABLE = ReasonScoreTable(weights=_DEFAULT_WEIGHTS, explanations=_DEFAULT_EXPLANATIONS)
__all__ = ['DEFAULT_SCORE_TABLE', 'REASON_ALREADY_COMPILED_INTO_A_BIG_METHOD', 'REASON_ALREADY_COMPILED_INTO_A_MEDIUM_METHOD', 'REASON_CALLEE_IS_TOO_LARGE', 'REASON_CALL_SITE_NOT_REACHED', 'REASON_EXEC_LESS_MIN_INLINING_THRESHOLD', 'REASON_HOT_METHOD_TOO_BIG', 'REASON_NATIVE_METHOD', 'REASON_NEVER_EXECUTED', 'REASON_NO_STATIC_BINDING', 'REASON_TOO_BIG', 'REASON_UNCERTAIN_BRANCH', 'ReasonScoreTable']
