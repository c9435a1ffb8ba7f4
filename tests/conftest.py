import pytest

from argstore import configure


@pytest.fixture(autouse=True)
def isolated_global_args():
    """Give every test the global store it started with, whatever it adds."""
    with configure() as store:
        yield store
