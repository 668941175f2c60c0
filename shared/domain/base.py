"""
Base Domain Classes

Foundational building blocks shared by the domain packages:
- ValueObject: Immutable objects compared by value
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
