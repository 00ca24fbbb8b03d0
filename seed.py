import logging
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import settings
from app.core.database import connect_database, create_database_tables
from app.core.exceptions import StorageError
from app.schemas.student import StudentCreate
from app.services.student import student as crud_student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    StudentCreate(name="Ali", age=20, grade="A"),
    StudentCreate(name="Sara", age=21, grade="B"),
    StudentCreate(name="Omar", age=19, grade="A"),
]


def seed_data():
    """
    Create the students table if needed and insert sample rows into an empty table.
    """
    db = connect_database(settings)
    try:
        create_database_tables(db.engine)

        # Skip when data is already there to avoid duplicates
        if crud_student.get_students(db):
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for student in SAMPLE_STUDENTS:
            student_id = crud_student.create_student(db, student)
            logger.info(f"Added {student.name} with id {student_id}")

        logger.info("Data seeded successfully!")

    except (StorageError, SQLAlchemyError) as e:
        logger.error(f"Error seeding data: {e}")
    finally:
        db.dispose() # Always close the connection

if __name__ == "__main__":
    seed_data()
