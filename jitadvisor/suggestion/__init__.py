from __future__ import annotations
from typing import TYPE_CHECKING, Any
__all__ = ['AttributeSuggestionWalker', 'DEFAULT_SCORE_TABLE', 'ReasonScoreTable', 'ReportConfig', 'Suggestion', 'SuggestionSink', 'SuggestionType', 'collect_suggestions', 'format_suggestion']
if TYPE_CHECKING:
    from .attribute_walker import AttributeSuggestionWalker
    from .report import ReportConfig, collect_suggestions, format_suggestion
    from .score_table import DEFAULT_SCORE_TABLE, ReasonScoreTable
    from .suggestion import Suggestion, SuggestionSink, SuggestionType
_EXPORTS: dict[str, tuple[str, str]] = {'AttributeSuggestionWalker': ('attribute_walker', 'AttributeSuggestionWalker'), 'ReportConfig': ('report', 'ReportConfig'), 'collect_suggestions': ('report', 'collect_suggestions'), 'format_suggestion': ('report', 'format_suggestion'), 'DEFAULT_SCORE_TABLE': ('score_table', 'DEFAULT_SCORE_TABLE'), 'ReasonScoreTable': ('score_table', 'ReasonScoreTable'), 'Suggestion': ('suggestion', 'Suggestion'), 'SuggestionSink': ('suggestion', 'SuggestionSink'), 'SuggestionType': ('suggestion', 'SuggestionType')}

def __getattr__(name: str) -> Any:
    entry = _EXPORTS.get(name)
    if entry is None:
        raise AttributeError(name)
    mod_name, attr = entry
    module = __import__(f'{__name__}.{mod_name}', fromlist=[attr])
    return getattr(module, attr)

def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
