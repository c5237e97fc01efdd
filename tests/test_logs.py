##########################################################################################
#
# Script name: test_logs.py
#
# Description: Opt-in logging configuration for the news core loggers.
#
##########################################################################################

import logging
from pathlib import Path

from news_core.logs import configure_logging


def test_configure_logging_writes_package_logs(tmp_path: Path) -> None:
    log_file = tmp_path / 'news_core.log'
    log = configure_logging(log_file=str(log_file), quiet=True)
    try:
        logging.getLogger('news_core.feeds').warning('Feed candidate failed for %s', 'joy')
        for handler in log.handlers:
            handler.flush()
        assert 'Feed candidate failed for joy' in log_file.read_text(encoding='utf-8')

        configure_logging(log_file=str(log_file), quiet=True)
        assert len(log.handlers) == 2
    finally:
        for handler in list(log.handlers):
            handler.close()
            log.removeHandler(handler)
        log.propagate = True
