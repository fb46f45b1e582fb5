from typing import Any, Dict, List
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.technology import Technology
from app.utils.exceptions import DuplicateException, NotFoundException
from app.utils.logger import app_logger
from app.utils.sql import (
    FilterMode,
    FilterRule,
    bind_params,
    compile_filters,
    placeholder,
    sql_for_partial_update,
)

# 목록 조회 검색 조건 -> 컬럼/비교 방식
TECH_FILTER_RULES = {
    "name": FilterRule("name", FilterMode.CONTAINS),
}


def create_technology(db: Session, name: str) -> Technology:
    # 중복 체크
    if db.query(Technology).filter(Technology.name == name).first():
        raise DuplicateException(f"이미 등록된 기술명입니다: {name}")

    tech = Technology(name=name)
    db.add(tech)
    try:
        db.commit()
    except IntegrityError:
        # 동시 요청으로 중복 체크를 통과한 경우 UNIQUE 제약에서 걸림
        db.rollback()
        raise DuplicateException(f"이미 등록된 기술명입니다: {name}")
    db.refresh(tech)

    app_logger.info(f"기술 등록 완료: {tech.id} {tech.name}")
    return tech


def find_technologies(db: Session, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
    """검색 조건(name: 부분 일치)으로 기술 목록 조회"""
    predicate = compile_filters(filters, TECH_FILTER_RULES)
    rows = db.execute(
        text(f"SELECT id, name FROM technologies {predicate.where} ORDER BY id"),
        predicate.params,
    ).mappings().all()
    return [dict(row) for row in rows]


def get_technology(db: Session, tech_id: int) -> Technology:
    tech = db.query(Technology).filter(Technology.id == tech_id).first()
    if not tech:
        raise NotFoundException("기술", f"ID {tech_id}의 기술을 찾을 수 없습니다.")
    return tech


def update_technology(db: Session, tech_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    update = sql_for_partial_update(data)
    query = text(
        f"UPDATE technologies SET {update.set_clause} "
        f"WHERE id = {placeholder(update.next_index)} "
        f"RETURNING id, name"
    )
    try:
        row = db.execute(query, bind_params(update.values + [tech_id])).mappings().first()
    except IntegrityError:
        db.rollback()
        raise DuplicateException(f"이미 등록된 기술명입니다: {data.get('name')}")

    if row is None:
        db.rollback()
        raise NotFoundException("기술", f"ID {tech_id}의 기술을 찾을 수 없습니다.")

    db.commit()
    return dict(row)


def remove_technology(db: Session, tech_id: int) -> None:
    tech = get_technology(db, tech_id)
    db.delete(tech)
    db.commit()
    app_logger.info(f"기술 삭제 완료: {tech_id}")
