"""cargo-ensure-prefix: verify that crate source files start with a required prefix."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
