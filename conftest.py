import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
	"""Drop handlers installed by setup_logging so they do not outlive a test."""
	yield
	logger = logging.getLogger("xyzmonitor")
	for handler in logger.handlers:
		handler.close()
	logger.handlers.clear()
	logger.setLevel(logging.NOTSET)
