import random

import pytest

from reference import WIDTHS


@pytest.fixture
def rng():
    return random.Random(20241019)


@pytest.fixture(params=WIDTHS, ids=lambda cls: cls.__name__)
def width_cls(request):
    return request.param
