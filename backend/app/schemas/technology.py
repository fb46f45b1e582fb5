# 기술 항목 관련 스키마

from pydantic import BaseModel, Field
from typing import Optional, List

class TechnologyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, description="기술 이름")

    class Config:
        extra = "forbid"

class TechnologyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50, description="기술 이름")

    class Config:
        extra = "forbid"

# 목록 조회 검색 조건
class TechnologySearch(BaseModel):
    name: Optional[str] = Field(None, description="기술명 (대소문자 구분 없는 부분 일치)")

    class Config:
        extra = "forbid"

class TechnologyResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class TechnologyListResponse(BaseModel):
    technologies: List[TechnologyResponse]

# 사용자 보유 기술 / 공고 요구 기술 항목
class TechSkillItem(BaseModel):
    tech_id: int
    tech_name: str
