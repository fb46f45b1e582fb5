import secrets
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
from app.core.permissions import Identity, Policy, require
from app.core.security import create_token_for_user
from app.database import get_db
from app.schemas.job import MatchedJobsResponse
from app.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserSignup,
    UserTokenResponse,
    UserUpdate,
)
from app.services import user_service
from app.services.recommender import get_matched_jobs
from app.utils.logger import app_logger

router = APIRouter(prefix="/users", tags=["User"])

# 관리자 / 본인만 접근 가능한 라우트에서 사용
admin_or_owner = require(Policy.ADMIN_OR_OWNER, owner_param="username")

@router.post("/signup",
             response_model=UserTokenResponse,
             status_code=status.HTTP_201_CREATED,
             operation_id="signup",
             summary="회원가입")
def signup(user_data: UserSignup, db: Session = Depends(get_db)):
    """일반 사용자로 가입하고 바로 사용할 수 있는 토큰을 함께 반환합니다."""
    try:
        user = user_service.register(db, user_data.model_dump(), is_admin=False)
        return {"user": user, "token": create_token_for_user(user)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"회원가입 처리 중 오류: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"회원가입 처리 중 오류가 발생했습니다: {str(e)}")

@router.post("/",
             response_model=UserTokenResponse,
             status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require(Policy.ADMIN))],
             operation_id="create_user",
             summary="사용자 추가 (관리자)",
             description="""
관리자가 새 사용자를 추가합니다. 회원가입 엔드포인트와 달리 관리자 계정도 만들 수 있습니다.

- 비밀번호는 서버에서 임의로 생성합니다.
- 새 사용자의 토큰을 함께 반환합니다.
""")
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    try:
        data = user_data.model_dump(exclude={"is_admin"})
        data["password"] = secrets.token_urlsafe(10)
        user = user_service.register(db, data, is_admin=user_data.is_admin)
        return {"user": user, "token": create_token_for_user(user)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"사용자 추가 중 오류: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"사용자 추가 중 오류가 발생했습니다: {str(e)}")

@router.get("/",
            response_model=UserListResponse,
            dependencies=[Depends(require(Policy.ADMIN))],
            operation_id="list_users",
            summary="전체 사용자 조회 (관리자)")
def list_users(db: Session = Depends(get_db)):
    return {"users": user_service.find_all_users(db)}

# 내 정보 조회
@router.get("/me", response_model=UserResponse,
            operation_id="get_my_profile",
            summary="내 정보 조회", description="""
현재 로그인된 사용자의 정보를 조회합니다.

- 인증이 필요합니다 (Bearer Token).
""")
def get_my_profile(
    db: Session = Depends(get_db),
    identity: Optional[Identity] = Depends(require(Policy.AUTHENTICATED))
):
    return user_service.get_user(db, identity.username)

@router.get("/{username}",
            response_model=UserDetailResponse,
            dependencies=[Depends(admin_or_owner)],
            operation_id="get_user",
            summary="사용자 상세 조회",
            description="지원한 공고 ID 목록과 보유 기술을 함께 반환합니다. 관리자 또는 본인만 조회할 수 있습니다.")
def get_user(username: str, db: Session = Depends(get_db)):
    return user_service.get_user_detail(db, username)

@router.patch("/{username}",
              dependencies=[Depends(admin_or_owner)],
              operation_id="update_user",
              summary="사용자 정보 수정",
              description="""
전달된 필드(first_name, last_name, email, password)만 수정합니다.

- 관리자 또는 본인만 수정할 수 있습니다.
- 수정할 필드가 없으면 400 오류를 반환합니다.
""")
def update_user(username: str, user_data: UserUpdate, db: Session = Depends(get_db)):
    try:
        user = user_service.update_user(db, username, user_data.model_dump(exclude_none=True))
        return {"user": UserResponse.model_validate(user)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"사용자 정보 수정 중 오류: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"사용자 정보 수정 중 오류가 발생했습니다: {str(e)}")

@router.delete("/{username}",
               dependencies=[Depends(admin_or_owner)],
               operation_id="delete_user",
               summary="사용자 삭제")
def delete_user(username: str, db: Session = Depends(get_db)):
    user_service.remove_user(db, username)
    return {"deleted": username}

@router.post("/{username}/jobs/{job_id}",
             dependencies=[Depends(admin_or_owner)],
             operation_id="apply_to_job",
             summary="채용공고 지원")
def apply_to_job(username: str, job_id: int, db: Session = Depends(get_db)):
    user_service.apply_to_job(db, username, job_id)
    return {"applied": job_id}

@router.post("/{username}/techs/{tech_id}",
             dependencies=[Depends(admin_or_owner)],
             operation_id="add_tech_skill",
             summary="보유 기술 추가")
def add_tech_skill(username: str, tech_id: int, db: Session = Depends(get_db)):
    user_service.add_tech_skill(db, username, tech_id)
    return {"skill_added": tech_id}

@router.get("/{username}/matched-jobs",
            response_model=MatchedJobsResponse,
            dependencies=[Depends(admin_or_owner)],
            operation_id="get_matched_jobs",
            summary="지원 가능한 채용공고 조회",
            description="""
사용자의 보유 기술로 지원 자격을 갖춘 채용공고를 반환합니다.

- 공고의 요구 기술이 모두 보유 기술에 포함되어 있으면 매칭됩니다.
- 요구 기술이 없는 공고는 모든 사용자에게 매칭됩니다.
- 공고 순서(ID 순)를 그대로 유지합니다.
""")
def matched_jobs(username: str, db: Session = Depends(get_db)):
    return {"matched_jobs": get_matched_jobs(db, username)}
