from __future__ import annotations
from typing import Optional


class OptionError(Exception):
    pass


class UnwrapError(OptionError):
    def __init__(self, message: str = "unwrap over None.", operation: Optional[str] = "unwrap"):
        super().__init__(message); self.message = message; self.operation = operation
