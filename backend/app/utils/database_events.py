from sqlalchemy import event
from sqlalchemy.engine import Engine
import logging

logger = logging.getLogger(__name__)

def setup_database_events(engine: Engine):
    """데이터베이스 이벤트 리스너를 설정합니다."""

    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite는 기본적으로 외래키(ON DELETE CASCADE)를 강제하지 않음"""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    logger.debug("데이터베이스 이벤트 리스너 설정 완료")
