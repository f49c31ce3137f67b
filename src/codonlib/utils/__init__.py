"""
Module containing various utility functions and classes.
"""
from dataclasses import dataclass, fields
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(slots=True, frozen=True, kw_only=True)
class Config:
    """
    Config parent class that can conveniently set attributes from CLI args
    """
    @classmethod
    def from_obj(cls, obj: Any) -> 'Config':
        return cls(**{f.name: val for f in fields(cls) if (val := getattr(obj, f.name, None)) is not None})
