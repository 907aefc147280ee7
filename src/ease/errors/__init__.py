"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── BuilderError                          (builder.py)
    │   ├── InvalidAccessorError
    │   ├── NoDefaultConstructorError
    │   ├── FieldNotWritableError
    │   └── MissingOverrideForRequiredFieldError
    └── ConfigError                           (ease.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from ease.errors.base import BaseError
from ease.errors.builder import (
    BuilderError,
    FieldNotWritableError,
    InvalidAccessorError,
    MissingOverrideForRequiredFieldError,
    NoDefaultConstructorError,
)

__all__ = [
    "BaseError",
    "BuilderError",
    "FieldNotWritableError",
    "InvalidAccessorError",
    "MissingOverrideForRequiredFieldError",
    "NoDefaultConstructorError",
]
