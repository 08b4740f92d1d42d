import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from jobly.config import settings
from jobly.database import get_db, get_engine, init_db, query
from jobly.main import app
from jobly.utils.security import hash_token

ADMIN_TOKEN = "test-admin-token"
ADMIN_TOKEN_HASH = hash_token(ADMIN_TOKEN)


def _seed(db):
    query(
        db,
        """INSERT INTO companies (handle, name, num_employees, description, logo_url)
           VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
                  ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
                  ('c3', 'C3', 3, 'Desc3', NULL)""",
    )
    query(
        db,
        """INSERT INTO jobs (title, salary, equity, company_handle)
           VALUES ('Job1', 100, 0.1, 'c1'),
                  ('Job2', 200, 0.2, 'c1'),
                  ('Job3', 300, 0, 'c1'),
                  ('Job4', NULL, NULL, 'c1')""",
    )
    db.commit()


@pytest.fixture
def test_db(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'jobly.sqlite'}")
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    init_db(engine)

    with TestSession() as db:
        _seed(db)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def job_ids(db):
    rows = query(db, "SELECT id, title FROM jobs ORDER BY title")
    return {row["title"]: row["id"] for row in rows}


@pytest.fixture
def admin_settings():
    original = settings.admin_token_hash
    settings.admin_token_hash = ADMIN_TOKEN_HASH
    yield settings
    settings.admin_token_hash = original


@pytest.fixture
def client(test_db, admin_settings):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def company_c1_deleted(db, job_ids):
    """Remove company c1 while leaving its jobs in place."""
    db.execute(text("PRAGMA foreign_keys=OFF"))
    query(db, "DELETE FROM companies WHERE handle = $1", ["c1"])
    db.commit()
    return job_ids
