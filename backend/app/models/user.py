from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship
from app.database.PostgreSQL import Base

class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True, index=True)   # 아이디 (토큰 sub)
    hashed_password = Column(String, nullable=False)              # 비밀번호 해시
    first_name = Column(String, nullable=False)                   # 이름
    last_name = Column(String, nullable=False)                    # 성
    email = Column(String, nullable=False)                        # 이메일
    is_admin = Column(Boolean, nullable=False, default=False)     # 관리자 여부

    # Relationships to other tables (one-to-many)
    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    tech_skills = relationship("TechSkill", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
