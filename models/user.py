"""
models/user.py
--------------
Domain model for registered users (owners and guests).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a LightBnB user.

    Attributes:
        name: Display name.
        email: Unique login address, used as the natural lookup key.
        password: Already-hashed password; hashing is the caller's job.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
