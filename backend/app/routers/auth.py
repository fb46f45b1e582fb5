from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel

from app.database import get_db
from app.core.security import create_token_for_user
from app.services.user_service import authenticate
from app.utils.logger import auth_logger

router = APIRouter(tags=["auth"])


# 토큰 응답 모델
class TokenResponse(BaseModel):
    access_token: str
    token_type: str


# ID 기반 로그인
@router.post(
    "/token",
    summary="아이디 로그인",
    operation_id="login_by_id",
    description="username과 password를 받아 로그인합니다.",
    response_model=TokenResponse,
)
def login_by_id(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)) -> TokenResponse:
    user = authenticate(db, form_data.username, form_data.password)
    access_token = create_token_for_user(user)
    auth_logger.info(f"로그인 성공: {user.username}")
    return {"access_token": access_token, "token_type": "bearer"}
