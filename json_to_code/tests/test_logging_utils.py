import logging

import pytest

from json_to_code.logging_utils import configure_logging


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.mark.parametrize("verbosity,level", [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)])
def test_configure_logging(root_level, verbosity, level):
    configure_logging(verbosity)
    assert root_level.level == level
