import warnings

import pytest


@pytest.fixture
def no_warnings():
    """Turn any warning raised inside the test into an error."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        yield
