import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the module-level engine off the user's data directory
os.environ.setdefault("COMPANY_DB_URL", "sqlite://")

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, create_db_engine, get_db
from dtos.request import CompanyDto, EmployeeDto, ProfileDto
from services.company_service import CompanyService
import models  # noqa: F401


@pytest.fixture
def engine():
    """In-memory database shared by every session of a test, with foreign keys enforced"""
    engine = create_db_engine('sqlite://', poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create in-memory database for testing"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def company_service(db_session):
    return CompanyService(db_session)


@pytest.fixture
def client(session_factory):
    """HTTP client whose requests run against the test database"""
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ibm_dto():
    return CompanyDto(
        name="IBM",
        employees=[
            EmployeeDto(name="Tom", age=19),
            EmployeeDto(name="Jim", age=21),
        ],
        profile=ProfileDto(registered_capital=100010, cert_id="100"),
    )


@pytest.fixture
def ibm_payload(ibm_dto):
    return ibm_dto.model_dump()
