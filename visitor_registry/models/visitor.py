"""Visitor data model for check-in records."""
from dataclasses import dataclass
from typing import Any, Dict

from visitor_registry.utils.validation import (
    validate_age,
    validate_comments,
    validate_full_name,
    validate_visit_date,
    validate_visit_time,
)

# Serialized key for each attribute, in document order
FIELD_KEYS = (
    ("full_name", "fullName"),
    ("age", "age"),
    ("visit_date", "visitDate"),
    ("visit_time", "visitTime"),
    ("comments", "comments"),
    ("assistant", "assistant"),
)


@dataclass(frozen=True)
class Visitor:
    """A single visitor check-in, validated on construction."""

    full_name: str
    age: int
    visit_date: str  # dd/mm/yyyy
    visit_time: str  # hh:mm
    comments: str
    assistant: str

    def __post_init__(self):
        """Validate visitor data, stopping at the first invalid field."""
        validate_full_name(self.full_name, "fullName")
        validate_age(self.age)
        validate_visit_date(self.visit_date)
        validate_visit_time(self.visit_time)
        # Frozen instance: normalized comments must bypass __setattr__
        object.__setattr__(self, "comments", validate_comments(self.comments))
        validate_full_name(self.assistant, "assistant")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Visitor":
        """
        Build a visitor from a raw bundle keyed by serialized field names.

        Args:
            data: Mapping with fullName, age, visitDate, visitTime,
                comments and assistant. Missing keys count as None.

        Returns:
            Validated Visitor

        Raises:
            ValidationError: If any field is invalid
        """
        return cls(**{attr: data.get(key) for attr, key in FIELD_KEYS})

    def to_dict(self) -> Dict[str, Any]:
        """Serialized fields in document order."""
        return {key: getattr(self, attr) for attr, key in FIELD_KEYS}
