from __future__ import annotations

import os

# 앱 import 전에 테스트용 설정 주입 (인메모리 SQLite, 빠른 bcrypt)
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["BCRYPT_WORK_FACTOR"] = "4"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app import models
from app.core.security import create_access_token, get_password_hash
from app.database import Base, SessionLocal, engine
from app.main import app


@pytest.fixture
def seed() -> dict:
    """테이블을 새로 만들고 공통 테스트 데이터를 넣는다.

    - jobs: Job1 {tech1, tech2}, Job2 {tech1, tech2, tech3}, Job3 {}, Job4 {}
    - skills: u1 {tech1, tech2}, u2 {tech1, tech2, tech3}, u3 {tech1}
    - applications: u1 -> Job1, Job2
    """
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    session.add_all([
        models.User(username="u1", hashed_password=get_password_hash("password1"),
                    first_name="U1F", last_name="U1L", email="u1@email.com", is_admin=False),
        models.User(username="u2", hashed_password=get_password_hash("password2"),
                    first_name="U2F", last_name="U2L", email="u2@email.com", is_admin=False),
        models.User(username="u3", hashed_password=get_password_hash("password3"),
                    first_name="U3F", last_name="U3L", email="u3@email.com", is_admin=False),
        models.User(username="admin", hashed_password=get_password_hash("adminpass"),
                    first_name="AF", last_name="AL", email="admin@email.com", is_admin=True),
    ])

    jobs = [
        models.Job(title="Job1", salary=100, equity=0.1, company_handle="c1"),
        models.Job(title="Job2", salary=200, equity=0.2, company_handle="c1"),
        models.Job(title="Job3", salary=300, equity=0.0, company_handle="c1"),
        models.Job(title="Job4", salary=None, equity=None, company_handle="c1"),
    ]
    techs = [models.Technology(name=f"tech{i}") for i in (1, 2, 3)]
    session.add_all(jobs + techs)
    session.flush()

    job_ids = [job.id for job in jobs]
    tech_ids = [tech.id for tech in techs]

    session.add_all([
        models.Requirement(job_id=job_ids[0], tech_id=tech_ids[0]),
        models.Requirement(job_id=job_ids[0], tech_id=tech_ids[1]),
        models.Requirement(job_id=job_ids[1], tech_id=tech_ids[0]),
        models.Requirement(job_id=job_ids[1], tech_id=tech_ids[1]),
        models.Requirement(job_id=job_ids[1], tech_id=tech_ids[2]),
        models.TechSkill(username="u1", tech_id=tech_ids[0]),
        models.TechSkill(username="u1", tech_id=tech_ids[1]),
        models.TechSkill(username="u2", tech_id=tech_ids[0]),
        models.TechSkill(username="u2", tech_id=tech_ids[1]),
        models.TechSkill(username="u2", tech_id=tech_ids[2]),
        models.TechSkill(username="u3", tech_id=tech_ids[0]),
        models.Application(username="u1", job_id=job_ids[0]),
        models.Application(username="u1", job_id=job_ids[1]),
    ])
    session.commit()
    session.close()

    yield {"job_ids": job_ids, "tech_ids": tech_ids}

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(seed):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(seed):
    with TestClient(app) as test_client:
        yield test_client


def _auth(username: str, is_admin: bool = False) -> dict:
    token = create_access_token({"sub": username, "is_admin": is_admin})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def u1_headers() -> dict:
    return _auth("u1")


@pytest.fixture
def u2_headers() -> dict:
    return _auth("u2")


@pytest.fixture
def admin_headers() -> dict:
    return _auth("admin", is_admin=True)
