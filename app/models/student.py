from sqlalchemy import Column, Integer, MetaData, String, Table

metadata = MetaData()

# Queries are written as plain SQL in app.services.student; this table
# definition only backs create_database_tables().
students = Table(
    "students",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("age", Integer, nullable=False),
    Column("grade", String(50), nullable=False),
)
