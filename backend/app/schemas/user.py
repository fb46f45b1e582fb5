from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List
from app.schemas.technology import TechSkillItem

# /users/me 경로와 겹치는 아이디는 사용할 수 없음
RESERVED_USERNAMES = {"me"}


def check_reserved_username(value: str) -> str:
    if value.lower() in RESERVED_USERNAMES:
        raise ValueError(f"사용할 수 없는 아이디입니다: {value}")
    return value


# 회원가입용 (일반 사용자)
class UserSignup(BaseModel):
    username: str = Field(..., min_length=1, max_length=25, description="아이디")
    password: str = Field(..., min_length=5, max_length=20, description="비밀번호")
    first_name: str = Field(..., min_length=1, max_length=30, description="이름")
    last_name: str = Field(..., min_length=1, max_length=30, description="성")
    email: EmailStr

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return check_reserved_username(value)

    class Config:
        extra = "forbid"

# 관리자가 사용자 추가 (비밀번호는 서버에서 생성)
class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=25, description="아이디")
    first_name: str = Field(..., min_length=1, max_length=30, description="이름")
    last_name: str = Field(..., min_length=1, max_length=30, description="성")
    email: EmailStr
    is_admin: bool = False

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return check_reserved_username(value)

    class Config:
        extra = "forbid"

# 사용자 정보 부분 수정용
class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    password: Optional[str] = Field(None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None

    class Config:
        extra = "forbid"

# 사용자 응답용
class UserResponse(BaseModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True

# 사용자 상세 응답 (지원한 공고, 보유 기술 포함)
class UserDetailResponse(UserResponse):
    applied_jobs: List[int] = []
    tech_skills: List[TechSkillItem] = []

class UserTokenResponse(BaseModel):
    user: UserResponse
    token: str

class UserListResponse(BaseModel):
    users: List[UserResponse]
