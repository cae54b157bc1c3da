from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import yaml
from .model.errors import ScoreTableError
from .paths import DEFAULT_SCORE_TABLE, score_table_override
from .suggestion.score_table import DEFAULT_SCORE_TABLE as BUILTIN_SCORE_TABLE
from .suggestion.score_table import ReasonScoreTable
logger = logging.getLogger(__name__)

def _read_document(path: Path) -> Dict[str, Any]:
    with path.open('r', encoding='utf-8') as handle:
        try:
            if path.suffix.lower() == '.json':
                payload = json.load(handle)
            else:
                payload = yaml.safe_load(handle)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ScoreTableError(f'Malformed score table {path}: {exc}') from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ScoreTableError(f'Score table {path} must be a mapping, got {type(payload).__name__}')
    return payload

def _section(payload: Mapping[str, Any], key: str, path: Path) -> Dict[str, Any]:
    value = payload.get(key) or {}
    if not isinstance(value, dict):
        raise ScoreTableError(f"Section '{key}' of {path} must be a mapping")
    return {str(k): v for k, v in value.items()}

def score_table_from_mapping(payload: Mapping[str, Any], *, base: Optional[ReasonScoreTable]=None, source: Union[str, Path]='<mapping>') -> ReasonScoreTable:
    path = Path(str(source))
    weights = _section(payload, 'weights', path)
    explanations = _section(payload, 'explanations', path)
    if payload.get('replace') or base is None:
        return ReasonScoreTable(weights=weights, explanations=explanations)
    return base.merged(weights=weights, explanations=explanations)

def load_score_table(config_path: Optional[Union[str, Path]]=None) -> ReasonScoreTable:
    if config_path:
        path = Path(config_path)
    else:
        path = score_table_override() or DEFAULT_SCORE_TABLE
    if not path.exists():
        if config_path:
            raise ScoreTableError(f'Score table not found: {path}')
        logger.info('Score table %s not found, using built-in defaults', path)
        return BUILTIN_SCORE_TABLE
    payload = _read_document(path)
    table = score_table_from_mapping(payload, base=BUILTIN_SCORE_TABLE, source=path)
    logger.debug('Loaded %d reason weights from %s', len(table.weights), path)
    return table
__all__ = ['load_score_table', 'score_table_from_mapping']
