# -*- coding: utf-8 -*-
"""
Identity entity model for the signed-in respondent.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Identity:
    """
    Respondent identity.

    roll_number is the identity token used to fetch the form schema.
    """

    roll_number: str = ""
    name: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.roll_number.strip()) and bool(self.name.strip())

    def to_dict(self) -> Dict[str, str]:
        """Convert to the wire/session representation."""
        return {
            "rollNumber": self.roll_number,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        """Create Identity from its wire/session representation."""
        return cls(
            roll_number=str(data.get("rollNumber", "")),
            name=str(data.get("name", "")),
        )
