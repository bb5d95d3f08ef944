"""
Generation outcomes.

A query either gets the provider's answer (Success) or an apology the caller
can show as-is (Degraded). Provider failures never reach the HTTP layer as
errors; they become a Degraded outcome with zero confidence.
"""

# Python Packages
from dataclasses import dataclass
from typing import Union

# App Messages
from ...util import messages





@dataclass(frozen = True)
class Success:
    text: str

    @property
    def degraded(self) -> bool:
        return False



@dataclass(frozen = True)
class Degraded:
    apology_text: str
    reason: str

    @property
    def text(self) -> str:
        return self.apology_text

    @property
    def degraded(self) -> bool:
        return True

    @classmethod
    def from_error(cls, error: Exception) -> "Degraded":
        reason = str(error) or error.__class__.__name__
        return cls(
            apology_text = messages.ERROR["QUERY_DEGRADED"].format(reason = reason),
            reason = reason
        )



GenerationOutcome = Union[Success, Degraded]
