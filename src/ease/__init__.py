"""
ease – fluent builders for test fixtures.

Import path convention::

    from ease.builders import A, Builder, DynamicBuilder
    from ease.errors import InvalidAccessorError
    from ease.config import get_settings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
