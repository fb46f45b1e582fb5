from pydantic import BaseModel, Field
from typing import Optional, List
from app.schemas.technology import TechSkillItem

class JobCreate(BaseModel):
    title: str = Field(..., min_length=1, description="공고 제목")
    salary: Optional[int] = Field(None, ge=0, description="연봉")
    equity: Optional[float] = Field(None, ge=0, le=1, description="지분 (0 ~ 1)")
    company_handle: Optional[str] = Field(None, description="회사 식별자")

    class Config:
        extra = "forbid"

# 회사는 변경할 수 없음
class JobUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1)

    class Config:
        extra = "forbid"

# 목록 조회 검색 조건
class JobSearch(BaseModel):
    title: Optional[str] = Field(None, description="제목 (대소문자 구분 없는 부분 일치)")
    min_salary: Optional[int] = Field(None, ge=0, description="최소 연봉")
    has_equity: Optional[bool] = Field(None, description="true이면 지분이 있는 공고만")

    class Config:
        extra = "forbid"

class JobResponse(BaseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: Optional[str] = None

    class Config:
        from_attributes = True

# 상세 조회 (요구 기술 포함)
class JobDetailResponse(JobResponse):
    requirements: List[TechSkillItem] = []

class JobListResponse(BaseModel):
    jobs: List[JobResponse]

class MatchedJobsResponse(BaseModel):
    matched_jobs: List[JobDetailResponse]
