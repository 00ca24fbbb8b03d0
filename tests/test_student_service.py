import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.exceptions import NotFoundError, StorageError, ValidationError
from app.main import create_app
from app.schemas.student import StudentCreate
from app.services.student import student as crud_student


def test_create_and_get(database):
    student_id = crud_student.create_student(
        database, StudentCreate(name="Ali", age=20, grade="A")
    )

    assert crud_student.get_student(database, student_id) == {
        "id": student_id, "name": "Ali", "age": 20, "grade": "A",
    }


def test_create_rejects_falsy_age(database):
    with pytest.raises(ValidationError) as exc_info:
        crud_student.create_student(database, StudentCreate(name="Ali", age=0, grade="A"))
    assert exc_info.value.details == {"missing": ["age"]}


def test_update_only_writes_given_columns(database):
    student_id = crud_student.create_student(
        database, StudentCreate(name="Ali", age=20, grade="A")
    )

    updated = crud_student.update_student(database, student_id, {"grade": "C"})

    assert updated == {"id": student_id, "name": "Ali", "age": 20, "grade": "C"}


def test_update_ignores_columns_outside_the_table(database):
    student_id = crud_student.create_student(
        database, StudentCreate(name="Ali", age=20, grade="A")
    )

    with pytest.raises(ValidationError):
        crud_student.update_student(database, student_id, {"id": 5})


def test_update_missing_row(database):
    with pytest.raises(NotFoundError):
        crud_student.update_student(database, 42, {"age": 30})


def test_delete_returns_affected_rows(database):
    student_id = crud_student.create_student(
        database, StudentCreate(name="Ali", age=20, grade="A")
    )

    assert crud_student.delete_student(database, student_id) == 1
    assert crud_student.delete_student(database, student_id) == 0
    assert crud_student.get_students(database) == []


def test_storage_error_keeps_driver_detail(broken_database):
    with pytest.raises(StorageError) as exc_info:
        crud_student.get_students(broken_database)

    assert exc_info.value.status_code == 500
    assert "no such table" in exc_info.value.details["error"]


def test_lifespan_opens_configured_database(tmp_path):
    settings = Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'school.db'}",
        DB_CREATE_TABLES=True,
    )
    app = create_app(settings=settings)

    with TestClient(app) as client:
        created = client.post("/students", json={"name": "Ali", "age": 20, "grade": "A"})
        assert created.status_code == 201
        assert len(client.get("/students").json()["students"]) == 1

    assert app.state.database is None
