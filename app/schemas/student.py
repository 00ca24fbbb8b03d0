from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str
    age: int
    grade: str


class StudentCreate(BaseModel):
    # Optional at parse time; the service reports missing fields itself
    name: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None


class StudentUpdate(BaseModel):
    """Only the keys present in the request body are applied (even null)."""
    name: Optional[str] = None
    age: Optional[int] = None
    grade: Optional[str] = None


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class StudentCreatedResponse(BaseModel):
    message: str
    studentId: int


class StudentListResponse(BaseModel):
    message: str
    students: List[Student]


class StudentResponse(BaseModel):
    message: str
    student: Student


class StudentUpdatedResponse(BaseModel):
    message: str
    updatedStudent: Student
