from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.core.permissions import Policy, require
from app.database import get_db
from app.schemas.job import (
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobSearch,
    JobUpdate,
)
from app.services import job_service
from app.utils.logger import app_logger

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="채용공고 등록",
    description="관리자만 사용할 수 있습니다."
)
def create_job(data: JobCreate, db: Session = Depends(get_db)):
    try:
        job = job_service.create_job(db, data.model_dump())
        return {"job": JobResponse.model_validate(job)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"채용공고 등록 실패: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"채용공고 등록 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/",
    response_model=JobListResponse,
    summary="채용공고 목록 조회 (필터 지원)",
    description="""
채용공고를 조회합니다. 모든 검색 조건은 선택사항입니다.\n
- `title`: 제목 부분 일치 (대소문자 구분 없음)\n
- `min_salary`: 최소 연봉\n
- `has_equity`: true이면 지분이 있는 공고만\n
- 정의되지 않은 검색 조건이 포함되면 422 오류를 반환합니다.
"""
)
def list_jobs(
    filters: Annotated[JobSearch, Query()],
    db: Session = Depends(get_db)
):
    jobs = job_service.find_jobs(db, filters.model_dump(exclude_none=True))
    app_logger.info(f"채용공고 조회 완료: {len(jobs)}건")
    return {"jobs": jobs}

@router.get(
    "/{job_id}",
    summary="채용공고 상세 조회",
    description="요구 기술 목록을 포함합니다. 인증이 필요하지 않습니다."
)
def get_job(job_id: int, db: Session = Depends(get_db)):
    job = job_service.get_job_detail(db, job_id)
    return {"job": JobDetailResponse.model_validate(job)}

@router.patch(
    "/{job_id}",
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="채용공고 수정",
    description="전달된 필드(title, salary, equity)만 수정합니다. 관리자만 사용할 수 있습니다."
)
def update_job(job_id: int, data: JobUpdate, db: Session = Depends(get_db)):
    try:
        job = job_service.update_job(db, job_id, data.model_dump(exclude_none=True))
        app_logger.info(f"채용공고 수정 완료: {job_id}")
        return {"job": job}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"채용공고 수정 실패: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"채용공고 수정 중 오류가 발생했습니다: {str(e)}")

@router.delete(
    "/{job_id}",
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="채용공고 삭제",
    description="관리자만 사용할 수 있습니다."
)
def delete_job(job_id: int, db: Session = Depends(get_db)):
    job_service.remove_job(db, job_id)
    return {"deleted": job_id}

@router.post(
    "/{job_id}/techs/{tech_id}",
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="요구 기술 추가",
    description="채용공고에 요구 기술을 추가합니다. 관리자만 사용할 수 있습니다."
)
def require_tech(job_id: int, tech_id: int, db: Session = Depends(get_db)):
    job_service.require_tech(db, job_id, tech_id)
    return {"required": tech_id}
