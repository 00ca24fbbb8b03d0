import re

from fastapi import APIRouter, Depends, Response, status
from app.api.deps import get_db
from app.core.database import Database
from app.core.exceptions import ValidationError
from app.services.student import student as crud_student
from app.schemas.student import (
    StudentCreate,
    StudentCreatedResponse,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
    StudentUpdatedResponse,
)

router = APIRouter()


# ASCII digits only: int() alone also takes "1_0" and non-ASCII digits
STUDENT_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def _parse_student_id(raw_id: str) -> int:
    if not STUDENT_ID_PATTERN.fullmatch(raw_id):
        raise ValidationError("Student ID must be a number", details={"id": raw_id})
    return int(raw_id)


@router.post("", response_model=StudentCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    db: Database = Depends(get_db)
):
    """
    Add a new student

    - **name**: student name (required)
    - **age**: student age (required)
    - **grade**: student grade (required)
    """
    student_id = crud_student.create_student(db, student)
    return {"message": "Student added successfully", "studentId": student_id}


@router.get("", response_model=StudentListResponse)
def get_students(db: Database = Depends(get_db)):
    """
    List every student
    """
    students = crud_student.get_students(db)
    return {"message": "Students retrieved successfully", "students": students}


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: str,
    db: Database = Depends(get_db)
):
    """
    Fetch one student by ID
    """
    student = crud_student.get_student(db, student_id=student_id)
    return {"message": "Student retrieved successfully", "student": student}


@router.put("/{student_id}", response_model=StudentUpdatedResponse)
def update_student(
    student_id: str,
    student: StudentUpdate,
    db: Database = Depends(get_db)
):
    """
    Update some of a student's fields

    Only the fields sent in the body change; an explicit null is applied too.
    """
    sid = _parse_student_id(student_id)
    updated = crud_student.update_student(
        db,
        student_id=sid,
        fields=student.model_dump(exclude_unset=True),
    )
    return {"message": "Student updated successfully", "updatedStudent": updated}


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: str,
    db: Database = Depends(get_db)
):
    """
    Delete a student

    Answers 204 whether or not the student existed.
    """
    sid = _parse_student_id(student_id)
    crud_student.delete_student(db, student_id=sid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
