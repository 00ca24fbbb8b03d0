import logging
from typing import Any, Dict, List, Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Database
from app.core.exceptions import NotFoundError, StorageError, ValidationError
from app.schemas.student import StudentCreate

logger = logging.getLogger(__name__)

# Column order used for SELECTs and for building UPDATE statements
STUDENT_COLUMNS = ("id", "name", "age", "grade")
UPDATABLE_FIELDS = ("name", "age", "grade")

SELECT_STUDENTS = "SELECT id, name, age, grade FROM students"


def _storage_error(message: str, exc: SQLAlchemyError) -> StorageError:
    logger.error(f"{message}: {exc}")
    return StorageError(message, details={"error": str(getattr(exc, "orig", None) or exc)})


def create_student(db: Database, student: StudentCreate) -> int:
    """Insert a student and return the id assigned by the database."""
    missing = [field for field in UPDATABLE_FIELDS if not getattr(student, field)]
    if missing:
        raise ValidationError(
            "Please provide all fields: name, age, grade",
            details={"missing": missing},
        )

    query = text("INSERT INTO students (name, age, grade) VALUES (:name, :age, :grade)")
    try:
        with db.transaction() as conn:
            result = conn.execute(
                query,
                {"name": student.name, "age": student.age, "grade": student.grade},
            )
            return result.lastrowid
    except SQLAlchemyError as e:
        raise _storage_error("Error adding student", e) from e


def get_students(db: Database) -> List[Dict[str, Any]]:
    """All students in insertion order"""
    try:
        with db.transaction() as conn:
            rows = conn.execute(text(f"{SELECT_STUDENTS} ORDER BY id")).mappings().all()
    except SQLAlchemyError as e:
        raise _storage_error("Error retrieving students list", e) from e
    return [dict(row) for row in rows]


def get_student(db: Database, student_id: Any) -> Dict[str, Any]:
    """
    Fetch one student.

    The id is bound exactly as received from the path; a value that is not a
    number matches no row and ends up as NotFoundError.
    """
    try:
        with db.transaction() as conn:
            row = conn.execute(
                text(f"{SELECT_STUDENTS} WHERE id = :id"), {"id": student_id}
            ).mappings().first()
    except SQLAlchemyError as e:
        raise _storage_error("Error retrieving student data", e) from e

    if row is None:
        raise NotFoundError("Student not found")
    return dict(row)


def update_student(db: Database, student_id: int, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update and return the refreshed row.

    Every key present in `fields` is written, including None and empty
    strings. The UPDATE and the re-read share one transaction.
    """
    values = {name: fields[name] for name in UPDATABLE_FIELDS if name in fields}
    if not values:
        raise ValidationError("At least one field must be provided for update")

    assignments = ", ".join(f"{name} = :{name}" for name in values)
    query = text(f"UPDATE students SET {assignments} WHERE id = :id")

    try:
        with db.transaction() as conn:
            # MySQL dialects report matched rows, so an unchanged row still counts
            result = conn.execute(query, {**values, "id": student_id})
            if result.rowcount == 0:
                raise NotFoundError("Student not found")

            row = conn.execute(
                text(f"{SELECT_STUDENTS} WHERE id = :id"), {"id": student_id}
            ).mappings().first()
    except SQLAlchemyError as e:
        raise _storage_error("Error updating student", e) from e

    if row is None:
        raise NotFoundError("Student not found")
    return dict(row)


def delete_student(db: Database, student_id: int) -> int:
    """Delete a student; returns the number of rows removed (0 or 1)."""
    try:
        with db.transaction() as conn:
            result = conn.execute(text("DELETE FROM students WHERE id = :id"), {"id": student_id})
            deleted = result.rowcount
    except SQLAlchemyError as e:
        raise _storage_error("Error deleting student", e) from e

    if deleted == 0:
        logger.info(f"Delete matched no student with id {student_id}")
    return deleted
