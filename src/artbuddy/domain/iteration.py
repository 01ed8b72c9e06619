"""Iteration — one dated work-in-progress entry of a commission."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from artbuddy.domain.errors import require_type
from artbuddy.domain.values import Description, Feedback, ImagePath, IterationDate


@dataclass(frozen=True, kw_only=True)
class Iteration:
    """An immutable progress entry owned by a single commission.

    Identity is ``(date, description)``: two entries on the same day with
    the same description are the same iteration, whatever their image or
    feedback.
    """

    kind: ClassVar[str] = "iteration"

    date: IterationDate
    description: Description
    image_path: ImagePath
    feedback: Feedback

    def __post_init__(self) -> None:
        require_type(self.date, IterationDate, "date")
        require_type(self.description, Description, "description")
        require_type(self.image_path, ImagePath, "image_path")
        require_type(self.feedback, Feedback, "feedback")

    @property
    def identity_label(self) -> str:
        return f"{self.date} {self.description}"

    def is_same(self, other: Iteration | None) -> bool:
        """Weaker equality used for duplicate detection."""
        if other is self:
            return True
        return (
            isinstance(other, Iteration)
            and other.date == self.date
            and other.description == self.description
        )

    def __str__(self) -> str:
        return (
            f"{self.date}; Description: {self.description}; "
            f"Image: {self.image_path}; Feedback: {self.feedback}"
        )
