import datetime
import itertools

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import examcell.models  # noqa: F401  registers every table on Base.metadata
from examcell.db.base import Base
from examcell.schemas.classroom import Classroom
from examcell.schemas.exam import Exam
from examcell.schemas.faculty import Faculty
from examcell.schemas.student import Student

MONDAY = datetime.date(2024, 5, 6)
WORKING_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture()
def make_faculty():
    counter = itertools.count(1)

    def _make(**overrides) -> Faculty:
        index = next(counter)
        data = {
            "id": f"f{index}",
            "name": f"Faculty {index}",
            "department": "Physics",
            "email": f"faculty{index}@example.com",
            "max_supervisions": 5,
            "seniority": 3,
            "availability": {day: True for day in WORKING_DAYS},
            "preferred_semesters": "both",
        }
        data.update(overrides)
        return Faculty(**data)

    return _make


@pytest.fixture()
def make_student():
    counter = itertools.count(1)

    def _make(**overrides) -> Student:
        index = next(counter)
        data = {
            "id": f"s{index}",
            "name": f"Student {index}",
            "roll_number": f"R{index:04d}",
            "department": "Physics",
            "semester": 3,
            "section": "A",
        }
        data.update(overrides)
        return Student(**data)

    return _make


@pytest.fixture()
def make_classroom():
    counter = itertools.count(1)

    def _make(**overrides) -> Classroom:
        index = next(counter)
        data = {
            "id": f"r{index}",
            "name": f"Room {index}",
            "building": "Main",
            "floor": 1,
            "capacity": 30,
        }
        data.update(overrides)
        return Classroom(**data)

    return _make


@pytest.fixture()
def make_exam():
    counter = itertools.count(1)

    def _make(**overrides) -> Exam:
        index = next(counter)
        data = {
            "id": f"e{index}",
            "name": f"Exam {index}",
            "subject": "Physics",
            "date": MONDAY,
            "start_time": "10:00",
            "end_time": "12:00",
            "exam_type": "internal1",
        }
        data.update(overrides)
        return Exam(**data)

    return _make
