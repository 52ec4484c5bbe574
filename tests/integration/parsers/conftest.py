from pathlib import Path

import pytest

from pla_kit.parsers.pla_parser import PlaParser

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="module")
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture(scope="module")
def parsed_simple() -> PlaParser:
    """Parse the simple fixture once, reuse across tests."""
    return PlaParser.from_path(FIXTURES / "pla_simple.pla")


@pytest.fixture(scope="module")
def parsed_complicated() -> PlaParser:
    """Parse the complicated fixture once, reuse across tests."""
    return PlaParser.from_path(FIXTURES / "pla_complicated.pla")
