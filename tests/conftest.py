import pytest

from moldbind import Container


@pytest.fixture(autouse=True)
def fresh_containers():
    Container._instances.clear()  # noqa: SLF001
    yield
    Container._instances.clear()  # noqa: SLF001
