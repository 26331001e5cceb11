from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from jsonprettifier.constants import ENV_JSON_LOGS
from jsonprettifier.core.errors import ArgumentError
from jsonprettifier.core.report import BatchReport
from jsonprettifier.logging.helpers import get_logger, setup_base_logger
from jsonprettifier.parsing.parser import parse_config
from jsonprettifier.runtime.wiring import build_runner, workers_from_env


logger = get_logger('jsonprettifier')


def _configure_logging(enable_json: bool, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the base logger for one CLI run, either JSON or plain text."""
    return setup_base_logger(json_logs=enable_json, level=logging.INFO, stream=stream)


class JsonPrettifier:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stream: Optional[TextIO] = None) -> Optional[BatchReport]:
        """Format every JSON file under argv[0] with indent argv[1].

        Returns the batch report, or None when the arguments were rejected
        (the reason has already been logged and no file was touched).
        """
        json_logs = os.getenv(ENV_JSON_LOGS) == '1'
        lg = _configure_logging(json_logs, stream)

        try:
            config = parse_config(argv, workers=workers_from_env(lg))
        except ArgumentError as exc:
            lg.error('%s', exc)
            return None

        runner = build_runner(indent=config.indent, logger=lg)
        report = runner.run(config)
        lg.debug('batch finished in %.3fs', report.duration_s or 0.0)
        return report


def main() -> NoReturn:
    """Entry point for `python -m jsonprettifier` and the console script."""
    try:
        JsonPrettifier.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
