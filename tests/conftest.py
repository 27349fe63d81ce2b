from __future__ import annotations

import pytest

from tests._fixtures.readers import full_answers


@pytest.fixture
def answers_script() -> list[str]:
    """Answers for every collector question, in declared order."""
    return full_answers()
