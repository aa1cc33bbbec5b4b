"""Global pytest fixtures for IZLY."""

from pathlib import Path
from unittest import mock

import pytest

from izly.adapters.random_sources import ScriptedRandomSource
from izly.domain.secret_code import SecretCode
from tests.helpers.codes import CORRECT_CODE


@pytest.fixture
def gate() -> mock.NonCallableMagicMock:
    """An autospecced secret code that accepts only `CORRECT_CODE` and is never blocked.

    Tests may override `gate.is_blocked.side_effect` or `gate.verify.side_effect`.
    """
    fake = mock.create_autospec(SecretCode, instance=True)
    fake.verify.side_effect = lambda candidate: candidate == CORRECT_CODE
    fake.is_blocked.return_value = False
    return fake


@pytest.fixture
def scripted_random() -> ScriptedRandomSource:
    """A random source replaying the digits 5, 4, 3, 2."""
    return ScriptedRandomSource([5, 4, 3, 2])


TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": pytest.mark.unit, "e2e": pytest.mark.e2e}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config,  # pylint: disable=unused-argument
    items: list[pytest.Item],
) -> None:
    """Mark items with the name of their top-level test folder (`unit` or `e2e`)."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if (marker := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(m.name == marker.name for m in item.iter_markers()):
            item.add_marker(marker)
