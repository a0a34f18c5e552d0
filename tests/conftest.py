import io
import logging

import pytest
from django.core.management import call_command


@pytest.fixture(autouse=True)
def silence_store_logger():
    """Keep expected rejection warnings out of the test output.

    Console tests deliberately trigger not-found and duplicate paths,
    which the store logs at WARNING via 'records.store'.
    """
    logger = logging.getLogger("records.store")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture
def run_console():
    """Feed scripted lines to the `rollbook` command and return its output."""

    def _run(*lines: str) -> str:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        call_command("rollbook", stdin=stdin, stdout=stdout)
        return stdout.getvalue()

    return _run
