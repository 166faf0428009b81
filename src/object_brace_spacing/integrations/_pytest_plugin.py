"""pytest plugin for object-brace-spacing.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from object_brace_spacing import check_source


@pytest.fixture(scope="session")
def assert_object_brackets_spaced() -> Any:
    """Fixture that returns a callable object-bracket spacing asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to check_source() which creates a fresh checker per call).

    Usage in tests::

        def test_generated_js(assert_object_brackets_spaced):
            assert_object_brackets_spaced("var x = { a: 1 };")

        def test_nested(assert_object_brackets_spaced):
            assert_object_brackets_spaced("f({ a: { b: 1 }});", mode="allButNested")

    Returns:
        A callable ``_assert(source, mode="all", filename=None) -> None`` that
        raises ``AssertionError`` listing every violation found.
    """

    def _assert(source: str, mode: str = "all", filename: str | None = None) -> None:
        violations = check_source(source, mode=mode, filename=filename)
        if violations:
            details = "\n".join(f"  {violation.format()}" for violation in violations)
            raise AssertionError(
                f"{len(violations)} object bracket spacing violation(s) "
                f"(mode={mode}):\n{details}"
            )

    return _assert
