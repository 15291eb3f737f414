from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def game_controller_source() -> str:
	return (FIXTURES / "TestSourceFile.cs").read_text(encoding="utf-8-sig")
