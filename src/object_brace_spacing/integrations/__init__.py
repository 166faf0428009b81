"""Integrations subpackage for object-brace-spacing.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_object_brackets_spaced`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
