"""Credits entries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A person named in the credits."""

    name: str = ""
    number: str = ""
    email: str = ""

    def __str__(self) -> str:
        return f"Name: {self.name}\nStudent ID: {self.number}\nEmail: {self.email}"