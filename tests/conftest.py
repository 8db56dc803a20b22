import pytest

from palettron import Palettron, palettron
from tests.samples import PRIMARY, SECONDARY


@pytest.fixture
def primary() -> Palettron:
    return palettron(PRIMARY)


@pytest.fixture
def secondary() -> Palettron:
    return palettron(SECONDARY)


@pytest.fixture
def rainbow() -> Palettron:
    return palettron(PRIMARY, SECONDARY)
