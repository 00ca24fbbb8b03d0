from fastapi import Request
from app.core.database import Database


def get_db(request: Request) -> Database:
    """
    Dependency returning the database handle opened at start-up.
    The handle lives on app.state so tests can inject their own.
    """
    return request.app.state.database
