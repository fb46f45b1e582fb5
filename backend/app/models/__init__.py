# User related models
from .user import User
from .tech_skill import TechSkill
from .application import Application

# Core models
from .technology import Technology

# Job related models
from .job import Job
from .requirement import Requirement

__all__ = [
    # User related
    "User", "TechSkill", "Application",
    # Core
    "Technology",
    # Job related
    "Job", "Requirement",
]
