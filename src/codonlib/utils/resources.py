"""
Package-wide resources: package identity and random number generation.
"""
from functools import cached_property
from importlib.metadata import version, PackageNotFoundError
from pathlib import Path

from numpy.random import default_rng


# Classes --------------------------------------------------------------------------------------------------------------
class Resources:
    """
    Manages global resources like the random number generator and the package metadata.

    Attributes:
        package (str): The package name.
    """
    def __init__(self) -> None:
        self.package = Path(__file__).parent.parent.name

    @cached_property
    def rng(self):
        """Returns a default numpy random number generator."""
        return default_rng()

    @cached_property
    def version(self) -> str:
        """Returns the installed package version, or ``'unknown'`` when running from a source tree."""
        try: return version(self.package)
        except PackageNotFoundError: return 'unknown'


# Constants ------------------------------------------------------------------------------------------------------------
RESOURCES = Resources()
