import datetime
import logging
import os

import pytest

from sudokugen.common.constants import LOG_LEVEL_ENV_VAR
from sudokugen.utils.log import ROOT_LOGGER_NAME


# Get the result of each test
@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


# Real-time print of start and end of test
@pytest.fixture(autouse=True)
def log_test_lifecycle(request):
    node_id = request.node.nodeid
    start_time = datetime.datetime.now().strftime("%H:%M:%S")

    print(f"\n[START] {start_time} - Running: {node_id}")

    yield

    end_time = datetime.datetime.now().strftime("%H:%M:%S")
    report = getattr(request.node, "rep_call", None)
    status = report.outcome.upper() if report else "UNKNOWN"

    print(f"\n[END] {end_time} - Result: {status} - {node_id}")


# Configs and the launcher set the package log level; keep it per test
@pytest.fixture(autouse=True)
def restore_log_level():
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    logger_level = logging.getLogger(ROOT_LOGGER_NAME).level

    yield

    if env_level is None:
        os.environ.pop(LOG_LEVEL_ENV_VAR, None)
    else:
        os.environ[LOG_LEVEL_ENV_VAR] = env_level
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logger_level)
