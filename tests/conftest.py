# File: tests/conftest.py
import pytest

from docs_archiver.config import ArchiverConfig
from tests.helpers import BASE_URL


@pytest.fixture()
def archive_dir(tmp_path):
    return tmp_path / "archive"


@pytest.fixture()
def basic_config(archive_dir) -> ArchiverConfig:
    """
    Return a valid ArchiverConfig with no politeness delay.
    """
    return ArchiverConfig(
        base_url=BASE_URL,
        start_url=BASE_URL,
        output_dir=archive_dir,
        delay=0,
        timeout=2.0,
        api_key="test-key",
    )
