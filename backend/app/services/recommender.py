from sqlalchemy.orm import Session
from typing import Any, Dict, List
from app.services.job_service import find_jobs, get_requirements_by_job
from app.services.user_service import get_tech_skill_ids
from app.utils.subset import is_subset
from app.utils.logger import recommender_logger


def get_matched_jobs(db: Session, username: str) -> List[Dict[str, Any]]:
    """
    사용자가 지원 자격을 갖춘 채용공고 목록을 반환합니다.

    공고의 요구 기술이 모두 사용자의 보유 기술에 포함되면 자격이 있는 것으로 봅니다.
    요구 기술이 없는 공고는 보유 기술이 없는 사용자를 포함해 모두에게 매칭됩니다.
    결과는 공고 조회 순서(ID 순)를 그대로 유지합니다.

    사용자가 없으면 공고를 조회하기 전에 NotFoundException이 발생합니다.
    """
    skill_ids = get_tech_skill_ids(db, username)

    jobs = find_jobs(db)
    requirements_by_job = get_requirements_by_job(db)

    matched = []
    for job in jobs:
        requirements = requirements_by_job.get(job["id"], [])
        required_ids = [r["tech_id"] for r in requirements]
        if is_subset(required_ids, skill_ids):
            matched.append({**job, "requirements": requirements})

    recommender_logger.info(
        f"매칭 공고 계산 완료: 사용자 {username}, 보유 기술 {len(skill_ids)}개, "
        f"전체 {len(jobs)}건 중 {len(matched)}건"
    )
    return matched
