from typing import Any, Dict, List, Set
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.core.security import get_password_hash, verify_password
from app.models.application import Application
from app.models.tech_skill import TechSkill
from app.models.technology import Technology
from app.models.user import User
from app.services.job_service import get_job
from app.services.technology_service import get_technology
from app.utils.exceptions import DuplicateException, NotFoundException, UnauthorizedException
from app.utils.logger import app_logger, auth_logger
from app.utils.sql import bind_params, placeholder, sql_for_partial_update

USER_COLUMNS = "username, first_name, last_name, email, is_admin"

# API 필드명 -> DB 컬럼명
USER_COLUMN_MAP = {
    "password": "hashed_password",
}


def authenticate(db: Session, username: str, password: str) -> User:
    """아이디/비밀번호 확인. 실패 시 UnauthorizedException"""
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        auth_logger.warning(f"로그인 실패: {username}")
        raise UnauthorizedException("아이디 또는 비밀번호가 올바르지 않습니다.")
    return user


def register(db: Session, data: Dict[str, Any], is_admin: bool = False) -> User:
    """
    사용자 등록. data에는 평문 password가 포함되어야 합니다.

    중복 아이디는 DuplicateException
    """
    if db.query(User).filter(User.username == data["username"]).first():
        raise DuplicateException(f"이미 존재하는 아이디입니다: {data['username']}")

    user = User(
        username=data["username"],
        hashed_password=get_password_hash(data["password"]),
        first_name=data["first_name"],
        last_name=data["last_name"],
        email=data["email"],
        is_admin=is_admin,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    app_logger.info(f"사용자 등록 완료: {user.username} (admin={user.is_admin})")
    return user


def find_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()


def get_user(db: Session, username: str) -> User:
    user = db.query(User).filter(User.username == username).first()
    if not user:
        raise NotFoundException("사용자", f"사용자를 찾을 수 없습니다: {username}")
    return user


def get_user_detail(db: Session, username: str) -> Dict[str, Any]:
    """사용자 정보 + 지원한 공고 ID 목록 + 보유 기술"""
    user = get_user(db, username)

    applied = db.query(Application.job_id).filter(
        Application.username == username
    ).order_by(Application.job_id).all()

    skills = db.query(TechSkill.tech_id, Technology.name).join(
        Technology, TechSkill.tech_id == Technology.id
    ).filter(
        TechSkill.username == username
    ).order_by(TechSkill.tech_id).all()

    return {
        "username": user.username,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "email": user.email,
        "is_admin": user.is_admin,
        "applied_jobs": [job_id for (job_id,) in applied],
        "tech_skills": [{"tech_id": tech_id, "tech_name": name} for tech_id, name in skills],
    }


def get_tech_skill_ids(db: Session, username: str) -> Set[int]:
    """사용자가 보유한 기술 ID 집합. 사용자가 없으면 NotFoundException"""
    get_user(db, username)
    rows = db.query(TechSkill.tech_id).filter(TechSkill.username == username).all()
    return {tech_id for (tech_id,) in rows}


def update_user(db: Session, username: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    사용자 정보 부분 수정. 전달된 필드만 변경합니다.

    password가 있으면 해싱하여 hashed_password 컬럼에 저장합니다.
    """
    data = dict(data)
    if data.get("password"):
        data["password"] = get_password_hash(data["password"])

    update = sql_for_partial_update(data, USER_COLUMN_MAP)
    query = text(
        f"UPDATE users SET {update.set_clause} "
        f"WHERE username = {placeholder(update.next_index)} "
        f"RETURNING {USER_COLUMNS}"
    )
    row = db.execute(query, bind_params(update.values + [username])).mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundException("사용자", f"사용자를 찾을 수 없습니다: {username}")

    db.commit()
    app_logger.info(f"사용자 정보 수정 완료: {username} ({', '.join(data)})")
    return dict(row)


def remove_user(db: Session, username: str) -> None:
    user = get_user(db, username)
    db.delete(user)
    db.commit()
    app_logger.info(f"사용자 삭제 완료: {username}")


def apply_to_job(db: Session, username: str, job_id: int) -> Application:
    get_user(db, username)
    get_job(db, job_id)

    exists = db.query(Application).filter(
        Application.username == username,
        Application.job_id == job_id
    ).first()
    if exists:
        raise DuplicateException("이미 지원한 공고입니다.")

    application = Application(username=username, job_id=job_id)
    db.add(application)
    db.commit()

    app_logger.info(f"채용공고 지원 완료: {username} -> {job_id}")
    return application


def add_tech_skill(db: Session, username: str, tech_id: int) -> TechSkill:
    get_user(db, username)
    get_technology(db, tech_id)

    exists = db.query(TechSkill).filter(
        TechSkill.username == username,
        TechSkill.tech_id == tech_id
    ).first()
    if exists:
        raise DuplicateException("이미 등록된 보유 기술입니다.")

    skill = TechSkill(username=username, tech_id=tech_id)
    db.add(skill)
    db.commit()

    app_logger.info(f"보유 기술 추가 완료: {username} -> {tech_id}")
    return skill
