"""Message addressing.

A message goes to exactly one of a registration token, a topic or a
condition expression. ``Target`` is the closed union of those three cases;
each concrete variant serializes as a single key that is flattened into the
message envelope. Values are sent verbatim; the server validates topic
names and condition syntax.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional


@dataclass(frozen=True)
class Target:
    """Base of the addressing union. Use Token, Topic or Condition."""

    value: str
    key: ClassVar[str] = ""

    def __post_init__(self):
        if type(self) is Target:
            raise TypeError("Target is abstract; use Token, Topic or Condition")
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} value must be a string, got: {type(self.value).__name__}"
            )

    def to_wire(self) -> Dict[str, str]:
        """Return the single flattened envelope entry for this target."""
        return {self.key: self.value}

    @classmethod
    def from_fields(
        cls,
        token: Optional[str] = None,
        topic: Optional[str] = None,
        condition: Optional[str] = None,
    ) -> "Target":
        """Build a target from keyword fields, requiring exactly one of them."""
        selected = [
            variant(value)
            for variant, value in ((Token, token), (Topic, topic), (Condition, condition))
            if value is not None
        ]
        if len(selected) != 1:
            raise ValueError(
                "Exactly one of token, topic or condition must be provided, "
                f"got {len(selected)}"
            )
        return selected[0]

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"


@dataclass(frozen=True)
class Token(Target):
    """A device registration token."""

    key: ClassVar[str] = "token"


@dataclass(frozen=True)
class Topic(Target):
    """A topic name, without the ``/topics/`` prefix."""

    key: ClassVar[str] = "topic"


@dataclass(frozen=True)
class Condition(Target):
    """A boolean topic condition such as ``"'a' in topics && 'b' in topics"``."""

    key: ClassVar[str] = "condition"
