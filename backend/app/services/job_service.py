from collections import defaultdict
from typing import Any, Dict, List
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.models.job import Job
from app.models.requirement import Requirement
from app.models.technology import Technology
from app.services.technology_service import get_technology
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

JOB_COLUMNS = "id, title, salary, equity, company_handle"

# 목록 조회 검색 조건 -> 컬럼/비교 방식 (이 순서대로 WHERE 절이 만들어짐)
JOB_FILTER_RULES = {
    "title": FilterRule("title", FilterMode.CONTAINS),
    "min_salary": FilterRule("salary", FilterMode.MIN),
    "has_equity": FilterRule("equity", FilterMode.FLAG, clause='"equity" > 0'),
}


def create_job(db: Session, data: Dict[str, Any]) -> Job:
    job = Job(**data)
    db.add(job)
    db.commit()
    db.refresh(job)

    app_logger.info(f"채용공고 등록 완료: {job.id} {job.title}")
    return job


def find_jobs(db: Session, filters: Dict[str, Any] = None) -> List[Dict[str, Any]]:
    """
    채용공고 목록 조회. 검색 조건은 모두 선택사항입니다.

    - title: 대소문자 구분 없는 부분 일치
    - min_salary: 연봉이 min_salary 이상
    - has_equity: true이면 지분이 0보다 큰 공고만
    """
    predicate = compile_filters(filters or {}, JOB_FILTER_RULES)
    rows = db.execute(
        text(f"SELECT {JOB_COLUMNS} FROM jobs {predicate.where} ORDER BY id"),
        predicate.params,
    ).mappings().all()
    return [dict(row) for row in rows]


def get_job(db: Session, job_id: int) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundException("채용공고", f"ID {job_id}의 채용공고를 찾을 수 없습니다.")
    return job


def get_requirements(db: Session, job_id: int) -> List[Dict[str, Any]]:
    rows = db.query(Requirement.tech_id, Technology.name).join(
        Technology, Requirement.tech_id == Technology.id
    ).filter(
        Requirement.job_id == job_id
    ).order_by(Requirement.tech_id).all()
    return [{"tech_id": tech_id, "tech_name": name} for tech_id, name in rows]


def get_requirements_by_job(db: Session) -> Dict[int, List[Dict[str, Any]]]:
    """모든 공고의 요구 기술을 한 번에 조회하여 job_id별로 묶어 반환"""
    rows = db.query(Requirement.job_id, Requirement.tech_id, Technology.name).join(
        Technology, Requirement.tech_id == Technology.id
    ).order_by(Requirement.job_id, Requirement.tech_id).all()

    grouped: Dict[int, List[Dict[str, Any]]] = defaultdict(list)
    for job_id, tech_id, name in rows:
        grouped[job_id].append({"tech_id": tech_id, "tech_name": name})
    return grouped


def get_job_detail(db: Session, job_id: int) -> Dict[str, Any]:
    job = get_job(db, job_id)
    return {
        "id": job.id,
        "title": job.title,
        "salary": job.salary,
        "equity": job.equity,
        "company_handle": job.company_handle,
        "requirements": get_requirements(db, job.id),
    }


def update_job(db: Session, job_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    update = sql_for_partial_update(data)
    query = text(
        f"UPDATE jobs SET {update.set_clause} "
        f"WHERE id = {placeholder(update.next_index)} "
        f"RETURNING {JOB_COLUMNS}"
    )
    row = db.execute(query, bind_params(update.values + [job_id])).mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundException("채용공고", f"ID {job_id}의 채용공고를 찾을 수 없습니다.")

    db.commit()
    return dict(row)


def remove_job(db: Session, job_id: int) -> None:
    job = get_job(db, job_id)
    db.delete(job)
    db.commit()
    app_logger.info(f"채용공고 삭제 완료: {job_id}")


def require_tech(db: Session, job_id: int, tech_id: int) -> Requirement:
    """공고에 요구 기술 추가"""
    get_job(db, job_id)
    get_technology(db, tech_id)

    exists = db.query(Requirement).filter(
        Requirement.job_id == job_id,
        Requirement.tech_id == tech_id
    ).first()
    if exists:
        raise DuplicateException("이미 등록된 요구 기술입니다.")

    requirement = Requirement(job_id=job_id, tech_id=tech_id)
    db.add(requirement)
    db.commit()

    app_logger.info(f"요구 기술 추가 완료: job_id={job_id}, tech_id={tech_id}")
    return requirement
