from typing import Hashable, Iterable


def is_subset(required: Iterable[Hashable], possessed: Iterable[Hashable]) -> bool:
    """required의 모든 원소가 possessed에 포함되어 있는지 확인합니다.

    required가 비어 있으면 항상 True (요구 기술이 없는 공고는 누구나 지원 가능).
    """
    if not isinstance(possessed, (set, frozenset)):
        possessed = set(possessed)
    return all(item in possessed for item in required)
