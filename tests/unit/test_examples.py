from pathlib import Path

import pytest

from expecto.testing import load_suite

EXAMPLES = Path(__file__).parents[2] / "examples"


@pytest.mark.parametrize(
    ("filename", "skipped"),
    [
        ("expecto_example_matchers.py", 0),
        ("expecto_example_async.py", 0),
        ("expecto_example_setup_teardown.py", 1),
    ],
)
def test_offline_examples_pass(run_suite, filename, skipped):
    suite = load_suite(EXAMPLES / filename)

    result = run_suite(suite)

    assert result.total > 0
    assert result.failed == 0, [r.message for r in result.failures]
    assert result.skipped == skipped
    assert result.hook_failures == []
    assert result.ok
