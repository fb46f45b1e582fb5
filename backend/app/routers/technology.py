from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from app.core.permissions import Policy, require
from app.database import get_db
from app.schemas.technology import (
    TechnologyCreate,
    TechnologyListResponse,
    TechnologyResponse,
    TechnologySearch,
    TechnologyUpdate,
)
from app.services import technology_service
from app.utils.logger import app_logger

router = APIRouter(prefix="/techs", tags=["technologies"])

@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="기술 등록",
    description="새로운 기술을 등록합니다. 관리자만 사용할 수 있습니다."
)
def create_technology(data: TechnologyCreate, db: Session = Depends(get_db)):
    try:
        tech = technology_service.create_technology(db, data.name)
        return {"technology": TechnologyResponse.model_validate(tech)}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"기술 등록 실패: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"기술 등록 중 오류가 발생했습니다: {str(e)}")

@router.get(
    "/",
    response_model=TechnologyListResponse,
    summary="기술 목록 조회",
    description="""
등록된 기술 목록을 조회합니다.

- `name`: 대소문자 구분 없는 부분 일치 검색
- 인증이 필요하지 않습니다.
"""
)
def list_technologies(
    filters: Annotated[TechnologySearch, Query()],
    db: Session = Depends(get_db)
):
    technologies = technology_service.find_technologies(db, filters.model_dump(exclude_none=True))
    app_logger.info(f"기술 목록 조회 완료: {len(technologies)}건")
    return {"technologies": technologies}

@router.get(
    "/{tech_id}",
    summary="기술 상세 조회",
    description="인증이 필요하지 않습니다."
)
def get_technology(tech_id: int, db: Session = Depends(get_db)):
    tech = technology_service.get_technology(db, tech_id)
    return {"technology": TechnologyResponse.model_validate(tech)}

@router.patch(
    "/{tech_id}",
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="기술 수정",
    description="전달된 필드만 수정합니다. 관리자만 사용할 수 있습니다."
)
def update_technology(tech_id: int, data: TechnologyUpdate, db: Session = Depends(get_db)):
    try:
        tech = technology_service.update_technology(db, tech_id, data.model_dump(exclude_none=True))
        app_logger.info(f"기술 수정 완료: {tech_id}")
        return {"technology": tech}
    except HTTPException:
        raise
    except Exception as e:
        app_logger.error(f"기술 수정 실패: {str(e)}")
        db.rollback()
        raise HTTPException(status_code=500, detail=f"기술 수정 중 오류가 발생했습니다: {str(e)}")

@router.delete(
    "/{tech_id}",
    dependencies=[Depends(require(Policy.ADMIN))],
    summary="기술 삭제",
    description="관리자만 사용할 수 있습니다."
)
def delete_technology(tech_id: int, db: Session = Depends(get_db)):
    technology_service.remove_technology(db, tech_id)
    return {"deleted": tech_id}
