# User related schemas
from .user import (
    UserSignup, UserCreate, UserUpdate, UserResponse, UserDetailResponse,
    UserTokenResponse, UserListResponse,
)

# Core schemas
from .technology import (
    TechnologyCreate, TechnologyUpdate, TechnologySearch, TechnologyResponse,
    TechnologyListResponse, TechSkillItem,
)

# Job related schemas
from .job import (
    JobCreate, JobUpdate, JobSearch, JobResponse, JobDetailResponse,
    JobListResponse, MatchedJobsResponse,
)

__all__ = [
    # User related
    "UserSignup", "UserCreate", "UserUpdate", "UserResponse", "UserDetailResponse",
    "UserTokenResponse", "UserListResponse",
    # Core
    "TechnologyCreate", "TechnologyUpdate", "TechnologySearch", "TechnologyResponse",
    "TechnologyListResponse", "TechSkillItem",
    # Job related
    "JobCreate", "JobUpdate", "JobSearch", "JobResponse", "JobDetailResponse",
    "JobListResponse", "MatchedJobsResponse",
]
