import logging
from unittest.mock import MagicMock

import pytest

import hc_logger


@pytest.fixture
def logger():
    yield logging.getLogger(hc_logger.LOGGER_NAME)
    logger = logging.getLogger(hc_logger.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def palette(adsk_core):
    return adsk_core.Application.get.return_value.userInterface.palettes.itemById.return_value


def test_records_go_to_the_text_commands_palette(logger, palette, adsk_core):
    hc_logger.setup_logging()

    logging.getLogger('hello_cube.main').info('Installed menu')

    adsk_core.Application.get.return_value.userInterface.palettes.itemById.assert_called_with('TextCommands')
    text = palette.writeText.call_args[0][0]
    assert text.startswith('[HelloCube] ')
    assert 'Installed menu' in text


def test_level_filters_records(logger, palette):
    hc_logger.setup_logging(logging.WARNING)

    logging.getLogger('hello_cube.main').info('quiet')

    palette.writeText.assert_not_called()


def test_setup_twice_does_not_duplicate_handlers(logger):
    hc_logger.setup_logging()
    hc_logger.setup_logging()

    assert len(logger.handlers) == 1


def test_file_log(logger, tmp_path):
    log_file = tmp_path / 'hello_cube.log'
    hc_logger.setup_logging(logging.DEBUG, str(log_file))

    logging.getLogger('hello_cube.operation').debug('Committed operation')
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding='utf-8')
    assert 'Logging initialized.' in content
    assert 'hello_cube.operation - DEBUG - Committed operation' in content


def test_palette_errors_do_not_reach_the_caller(logger, palette, monkeypatch):
    monkeypatch.setattr(logging, 'raiseExceptions', False)
    monkeypatch.setattr(palette, 'writeText', MagicMock(side_effect=RuntimeError('palette closed')))
    hc_logger.setup_logging()

    logging.getLogger('hello_cube.main').error('still fine')
