import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Logger:
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        self.enabled = logging_enabled
        if logging_enabled:
            self._logger.handlers.clear()
            self._logger.setLevel(logging.DEBUG)
            self._logger.addHandler(self._build_handler(log_file))
        else:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @staticmethod
    def _build_handler(log_file: Optional[str]) -> logging.Handler:
        # stdout carries rendered output, so "-" means stderr
        if log_file == '-':
            handler = logging.StreamHandler(sys.stderr)
        else:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                log_file = os.path.join(project_root, 'logs', 'ansiline_debug.log')
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
