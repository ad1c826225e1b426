import pytest

from expression_ranking.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def silent_logging():
    """Keep the global logger quiet unless a test reconfigures it"""
    configure_logging(LogLevel.SILENT)
    yield
    configure_logging(LogLevel.SILENT)
