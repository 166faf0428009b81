"""Hosts subpackage: ParsedFile implementations over real parsers.

``EsprimaFile`` is always importable; the ``esprima`` parser itself is an
optional extra and is only imported when a file is constructed:

    pip install object-brace-spacing[esprima]

Any other object satisfying the ``ParsedFile`` Protocol works with the
checker just as well.
"""

from object_brace_spacing.hosts.esprima import EsprimaFile, ParseError

__all__ = ["EsprimaFile", "ParseError"]
