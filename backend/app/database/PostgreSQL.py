# postgresql.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings
from app.utils.database_events import setup_database_events

SQLALCHEMY_DATABASE_URI = settings.SQLALCHEMY_DATABASE_URI

# SQLite(테스트용 인메모리 DB)는 스레드 간 단일 커넥션을 공유해야 함
if SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
    engine = create_engine(
        SQLALCHEMY_DATABASE_URI,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(SQLALCHEMY_DATABASE_URI, echo=False)

setup_database_events(engine)

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
