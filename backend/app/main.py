from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.config import settings
from app.database import Base, engine
from app.utils.exceptions import AppException, create_error_response
from app.utils.logger import app_logger
from app.routers import (
    auth,
    user,
    job,
    technology,
)
from app import models  # noqa: F401  모델 등록

# 앱 시작 시 데이터베이스 초기화 (테이블 생성)
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    app_logger.info("데이터베이스 테이블 초기화 완료")
    # 애플리케이션 실행
    yield

# FastAPI 앱 생성
app = FastAPI(
    title="Tech Jobs API",
    lifespan=lifespan
)

@app.get("/")
async def root():
    """API 루트 경로"""
    return {
        "message": "Tech Jobs API",
        "version": "1.0.0",
        "docs": "/docs",
    }

# 공통 에러 응답 포맷
@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.status_code, exc.detail, exc.error_code, exc.extra_data),
        headers=exc.headers,
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router)
app.include_router(user.router)
app.include_router(job.router)
app.include_router(technology.router)
