from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)    # 공고 ID
    title = Column(String, nullable=False)                # 공고 제목
    salary = Column(Integer, nullable=True)               # 연봉
    equity = Column(Float, nullable=True)                 # 지분 (0 ~ 1)
    company_handle = Column(String, nullable=True)        # 회사 식별자

    requirements = relationship("Requirement", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan", passive_deletes=True)
