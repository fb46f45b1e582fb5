from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

# 공고가 요구하는 기술 (job <-> technology)
class Requirement(Base):
    __tablename__ = "requirements"

    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True)

    job = relationship("Job", back_populates="requirements")
    technology = relationship("Technology", back_populates="requirements")
