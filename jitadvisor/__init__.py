__all__ = ['AttributeSuggestionWalker', 'ReasonScoreTable', 'Suggestion', 'SuggestionType', 'collect_suggestions', 'load_journal', 'load_score_table', 'setup_logging']

def __getattr__(name):
    if name in {'AttributeSuggestionWalker', 'ReasonScoreTable', 'Suggestion', 'SuggestionType', 'collect_suggestions'}:
        from . import suggestion
        return getattr(suggestion, name)
    if name == 'load_journal':
        from .journal import load_journal
        return load_journal
    if name == 'load_score_table':
        from .config_manager import load_score_table
        return load_score_table
    if name == 'setup_logging':
        from .logging_utils import setup_logging
        return setup_logging
    raise AttributeError(f"module 'jitadvisor' has no attribute '{name}'")
