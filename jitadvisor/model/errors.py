from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

class JITAdvisorError(Exception):
    pass

class LogParseError(JITAdvisorError):

    def __init__(self, message: str, *, source: Optional[Union[str, Path]]=None, cause: Optional[BaseException]=None) -> None:
        super().__init__(message)
        self.source = str(source) if source is not None else None
        self.cause = cause

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            return f'{base} (source={self.source})'
        return base

class ScoreTableError(JITAdvisorError):

    def __init__(self, message: str, *, reason: Optional[str]=None) -> None:
        super().__init__(message)
        self.reason = reason
__all__ = ['JITAdvisorError', 'LogParseError', 'ScoreTableError']
