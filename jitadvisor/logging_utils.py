from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import IO, Optional, Union
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
PACKAGE_LOGGER = 'jitadvisor'
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

def level_for_verbosity(verbosity: int) -> int:
    return _VERBOSITY_LEVELS[max(0, min(int(verbosity or 0), len(_VERBOSITY_LEVELS) - 1))]

def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and (not isinstance(handler, logging.FileHandler))

def setup_logging(*, console_level: int=logging.WARNING, file_path: Optional[Union[str, Path]]=None, file_level: int=logging.DEBUG, replace_existing: bool=True, stream: Optional[IO[str]]=None, package_level: Optional[int]=None) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if replace_existing:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    formatter = logging.Formatter(LOG_FORMAT)
    console_handlers = [h for h in root.handlers if _is_console_handler(h)]
    if not console_handlers:
        # reports go to stdout, so diagnostics stay on stderr
        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console_handlers = [console_handler]
        root.addHandler(console_handler)
    for handler in console_handlers:
        handler.setLevel(console_level)
        handler.setFormatter(formatter)
    if file_path:
        path_obj = Path(file_path)
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        existing_file_handler = None
        for handler in root.handlers:
            if isinstance(handler, logging.FileHandler) and Path(getattr(handler, 'baseFilename', '')).resolve() == path_obj.resolve():
                existing_file_handler = handler
                break
        if existing_file_handler is None:
            mode = 'w' if replace_existing else 'a'
            file_handler = logging.FileHandler(path_obj, mode=mode, encoding='utf-8')
            file_handler.setLevel(file_level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        else:
            existing_file_handler.setLevel(file_level)
            existing_file_handler.setFormatter(formatter)
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level if package_level is not None else logging.NOTSET)
    return root
__all__ = ['LOG_FORMAT', 'PACKAGE_LOGGER', 'level_for_verbosity', 'setup_logging']
