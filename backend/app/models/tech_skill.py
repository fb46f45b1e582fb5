from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

# 사용자가 보유한 기술 (user <-> technology)
class TechSkill(Base):
    __tablename__ = "tech_skills"

    username = Column(String(25), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True)

    user = relationship("User", back_populates="tech_skills")
    technology = relationship("Technology", back_populates="tech_skills")
