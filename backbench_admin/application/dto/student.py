"""Data transfer objects for admin student operations."""

from dataclasses import dataclass
from typing import List, Optional

from backbench_admin.domain.entities import StudentStatus


@dataclass(frozen=True)
class StudentStatsRequest:
    """Input for a student detail lookup."""
    student_id: Optional[str]

    def validate(self) -> List[str]:
        errors = []

        if not self.student_id or not self.student_id.strip():
            errors.append("Student ID is required")

        return errors


@dataclass(frozen=True)
class StudentStatusUpdateRequest:
    """Input for changing a student's lifecycle status."""
    student_id: Optional[str]
    status: Optional[str]

    ALLOWED_STATUSES = tuple(s.value for s in StudentStatus)

    def validate(self) -> List[str]:
        if not self.student_id or not self.student_id.strip() or not self.status:
            return ["Missing studentId or status"]

        if self.status not in self.ALLOWED_STATUSES:
            return ["Invalid status value"]

        return []


@dataclass(frozen=True)
class StudentStatusResponse:
    """The student row after a status change."""

    id: str
    status: str

    @classmethod
    def from_row(cls, row: dict) -> "StudentStatusResponse":
        return cls(id=str(row["id"]), status=row["status"])
