"""Test utilities for code built on perch.

Provides a recording ASGI sink and an HTTP scope factory::

    from perch.testing import RecordingSend, make_scope
"""

from perch.testing.sink import RecordingSend, make_scope

__all__ = [
    "RecordingSend",
    "make_scope",
]
