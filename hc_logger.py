# hc_logger.py - v 1.0.0 2025.10.19
#  
#  Copyright (c) 2025 Kanbara Tomonori
#  All rights reserved.
#  
#  x https://x.com/tomo1230
#  
#  This source code is proprietary and confidential.
#  Unauthorized copying, modification, distribution, or use is strictly prohibited.
#  
#  Author: Kanbara Tomonori
# 

import logging
import os

import adsk.core

LOGGER_NAME = 'hello_cube'
PALETTE_ID = 'TextCommands'
PALETTE_PREFIX = '[HelloCube]'
LOG_FILE_PATH = os.path.join(os.path.expanduser('~'), 'Documents', 'hello_cube.log')


class TextCommandsHandler(logging.Handler):
    """Writes records to Fusion's Text Commands palette."""
    def emit(self, record):
        try:
            ui = adsk.core.Application.get().userInterface
            palette = ui.palettes.itemById(PALETTE_ID) if ui else None
            if palette:
                palette.writeText(f"{PALETTE_PREFIX} {self.format(record)}")
        except Exception:
            self.handleError(record)


def setup_logging(level: int=logging.INFO, log_file: str=None) -> logging.Logger:
    """
    Configure the 'hello_cube' logger.

    Args:
        level: logging level for the logger and its handlers.
        log_file: optional path of a log file, overwritten on every setup.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Fusion re-runs add-ins in the same interpreter; drop handlers from the previous run.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    palette_handler = TextCommandsHandler()
    palette_handler.setLevel(level)
    palette_handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    logger.addHandler(palette_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(file_handler)

    logger.debug('Logging initialized.')
    return logger
