##########################################################################################
#
# Script name: logs.py
#
# Description: Opt-in logging setup for applications embedding the news core.
#
##########################################################################################

import logging
import sys


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

formatter = logging.Formatter(
    '%(asctime)-15s [%(funcName)25s:%(lineno)-5s] %(levelname)-8s %(message)s'
)


# ****************************************************************************************
# Functions
# ****************************************************************************************


def configure_logging(
    log_file: str | None = None,
    verbose: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    log = logging.getLogger('news_core')
    log.setLevel(logging.DEBUG)
    log.propagate = False

    # File handler for logging
    if log_file and not any(isinstance(handler, logging.FileHandler) for handler in log.handlers):
        fh = logging.FileHandler(log_file, mode='w')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        log.addHandler(fh)

    # Configure stdout logging based on arguments
    if not any(type(handler) is logging.StreamHandler for handler in log.handlers):
        ch = logging.StreamHandler(sys.stdout)
        if verbose:
            ch.setLevel(logging.DEBUG)
        elif quiet:
            ch.setLevel(logging.ERROR)
        else:
            ch.setLevel(logging.INFO)
        ch.setFormatter(formatter)
        log.addHandler(ch)

    log.debug('Logging configured (file=%s, verbose=%s, quiet=%s).', log_file, verbose, quiet)
    return log
