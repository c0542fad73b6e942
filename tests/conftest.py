import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.api.deps import get_db
from backoffice.db.init_db import drop_db, init_db
from backoffice.db.session import build_engine
from backoffice.models import (
    AcademicSession,
    Agent,
    Course,
    FeeStructure,
    FeeStructureComponent,
    FeeType,
    Student,
    University,
)
from backoffice.models.base import FeeFrequency


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    drop_db(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def catalog(db):
    """
    Two universities, one batch, one agent with two students, and a BBA
    fee structure of Tuition 15000 (yearly) plus Admission 2000 (one-time).
    """
    northfield = University(name="Northfield University")
    lakeside = University(name="Lakeside University")
    bba = Course(name="BBA")
    mba = Course(name="MBA")
    batch = AcademicSession(session_name="2024-2025", start_date=date(2024, 7, 1), end_date=date(2025, 6, 30))
    agent = Agent(name="Bright Futures", contact_person="R. Mehta", commission_rate=Decimal("10.00"))
    idle_agent = Agent(name="Open Doors", contact_person="S. Iyer", commission_rate=Decimal("5.00"))
    db.add_all([northfield, lakeside, bba, mba, batch, agent, idle_agent])
    db.flush()

    asha = Student(
        first_name="Asha", last_name="Rao", admission_number="ADM20240001",
        university_id=northfield.id, course_id=bba.id, academic_session_id=batch.id, agent_id=agent.id,
    )
    vikram = Student(
        first_name="Vikram", last_name="Singh", admission_number="ADM20240002",
        university_id=northfield.id, course_id=bba.id, academic_session_id=batch.id, agent_id=agent.id,
    )
    meera = Student(
        first_name="Meera", last_name="Nair", admission_number="ADM20240003",
        university_id=lakeside.id, course_id=mba.id, academic_session_id=batch.id,
    )
    tuition = FeeType(name="Tuition Fee", category="academic", amount=Decimal("15000.00"), frequency=FeeFrequency.YEARLY)
    admission = FeeType(name="Admission Fee", category="academic", amount=Decimal("2000.00"), frequency=FeeFrequency.ONE_TIME)
    db.add_all([asha, vikram, meera, tuition, admission])
    db.flush()

    structure = FeeStructure(name="BBA 2024", university_id=northfield.id, course_id=bba.id, is_active=True)
    tuition_component = FeeStructureComponent(fee_type_id=tuition.id, amount=Decimal("15000.00"), frequency=FeeFrequency.YEARLY)
    admission_component = FeeStructureComponent(fee_type_id=admission.id, amount=Decimal("2000.00"), frequency=FeeFrequency.ONE_TIME)
    structure.components = [tuition_component, admission_component]
    db.add(structure)
    db.commit()

    return SimpleNamespace(
        northfield=northfield,
        lakeside=lakeside,
        bba=bba,
        mba=mba,
        batch=batch,
        agent=agent,
        idle_agent=idle_agent,
        asha=asha,
        vikram=vikram,
        meera=meera,
        tuition=tuition,
        admission=admission,
        structure=structure,
        tuition_component=tuition_component,
        admission_component=admission_component,
    )


@pytest.fixture
def client(session_factory):
    from backoffice.main import create_app

    app = create_app(create_tables=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
