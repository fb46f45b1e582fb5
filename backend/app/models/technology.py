from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

class Technology(Base):
    __tablename__ = "technologies"

    id = Column(Integer, primary_key=True, index=True)    # 기술 ID
    name = Column(String, nullable=False, unique=True)    # 기술명

    tech_skills = relationship("TechSkill", back_populates="technology", passive_deletes=True)
    requirements = relationship("Requirement", back_populates="technology", passive_deletes=True)
