"""
부분 수정(SET 절)과 동적 검색 조건(WHERE 절)을 파라미터 바인딩 SQL로 만드는 헬퍼.

두 헬퍼 모두 `:p1`, `:p2` ... 처럼 1부터 순서대로 번호가 붙은 플레이스홀더를 사용하며,
값 목록은 플레이스홀더 번호 순서와 같습니다. SQLAlchemy `text()`에 넘길 때는
`bind_params()`로 변환합니다.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from app.utils.exceptions import InvalidUpdateRequest


def placeholder(idx: int) -> str:
    return f":p{idx}"


def bind_params(values: List[Any], start: int = 1) -> Dict[str, Any]:
    """순서가 있는 값 목록 -> {"p1": v1, "p2": v2, ...}"""
    return {f"p{idx}": value for idx, value in enumerate(values, start=start)}


@dataclass(frozen=True)
class PartialUpdate:
    set_clause: str
    values: List[Any]

    @property
    def next_index(self) -> int:
        # WHERE 절 등에 이어서 붙일 다음 플레이스홀더 번호
        return len(self.values) + 1


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Optional[Mapping[str, str]] = None
) -> PartialUpdate:
    """
    요청 본문으로 부분 수정(selective update)용 SET 절을 생성합니다.

    - data: 수정할 필드와 값. 예) {"first_name": "Aliya", "age": 32}
    - column_map: API 필드명 -> DB 컬럼명 매핑. 예) {"password": "hashed_password"}
      매핑에 없는 필드는 필드명을 그대로 컬럼명으로 사용합니다.

    반환 예)
        PartialUpdate(set_clause='"first_name"=:p1, "age"=:p2', values=["Aliya", 32])

    data가 비어 있으면 InvalidUpdateRequest를 발생시킵니다.
    """
    if not data:
        raise InvalidUpdateRequest()

    column_map = column_map or {}
    columns = [
        f'"{column_map.get(name, name)}"={placeholder(idx)}'
        for idx, name in enumerate(data, start=1)
    ]
    return PartialUpdate(set_clause=", ".join(columns), values=list(data.values()))


class FilterMode(str, Enum):
    EXACT = "exact"        # 정확히 일치
    CONTAINS = "contains"  # 대소문자 구분 없는 부분 일치
    MIN = "min"            # 이상(>=)
    FLAG = "flag"          # 값이 True일 때만 고정 조건 추가 (파라미터 없음)


@dataclass(frozen=True)
class FilterRule:
    column: str
    mode: FilterMode
    clause: Optional[str] = None  # FLAG 모드에서 사용할 고정 조건

    def __post_init__(self):
        if self.mode is FilterMode.FLAG and not self.clause:
            raise ValueError(f"FLAG 필터에는 고정 조건(clause)이 필요합니다: {self.column}")


def escape_like(value: str) -> str:
    """LIKE 패턴 문자(%, _)와 이스케이프 문자(\\)를 일반 문자로 취급하도록 변환"""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class Predicate:
    clause: str = ""
    values: List[Any] = field(default_factory=list)
    start: int = 1

    @property
    def where(self) -> str:
        # 조건이 없으면 WHERE 절 자체를 생략
        return f"WHERE {self.clause}" if self.clause else ""

    @property
    def params(self) -> Dict[str, Any]:
        return bind_params(self.values, start=self.start)


def compile_filters(
    filters: Mapping[str, Any],
    rules: Mapping[str, FilterRule],
    start: int = 1
) -> Predicate:
    """
    검색 필터를 AND로 결합된 조건과 파라미터 목록으로 변환합니다.

    rules의 순서대로 처리하므로 filters의 키 순서와 관계없이 결과가 같습니다.
    값이 None인 필터는 없는 것으로 취급합니다. 알 수 없는 키는 스키마 검증 단계에서
    이미 걸러졌다고 가정합니다.
    """
    fragments: List[str] = []
    values: List[Any] = []
    idx = start

    for key, rule in rules.items():
        value = filters.get(key)
        if value is None:
            continue

        column = f'"{rule.column}"'
        if rule.mode is FilterMode.FLAG:
            if value is True:
                fragments.append(rule.clause)
            continue

        if rule.mode is FilterMode.EXACT:
            fragments.append(f"{column} = {placeholder(idx)}")
            values.append(value)
        elif rule.mode is FilterMode.CONTAINS:
            fragments.append(f"LOWER({column}) LIKE {placeholder(idx)} ESCAPE '\\'")
            values.append(f"%{escape_like(str(value).lower())}%")
        elif rule.mode is FilterMode.MIN:
            fragments.append(f"{column} >= {placeholder(idx)}")
            values.append(value)
        idx += 1

    return Predicate(clause=" AND ".join(fragments), values=values, start=start)
