"""
환경 변수 파서

Settings 클래스 속성에서 바로 호출된다. 값이 없거나 공백뿐이면 default,
숫자 파싱에 실패해도 default (잘못된 .env 로 서버가 뜨지 못하는 일이 없게).
"""
import os
from typing import Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})


def _raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_number(name: str, default: T, cast: Callable[[str], T]) -> T:
    value = _raw(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        return default


def env_bool(name: str, default: bool = False) -> bool:
    value = _raw(name)
    return default if value is None else value.lower() in _TRUTHY


def env_list(name: str, default_list: Iterable[str]) -> List[str]:
    """콤마/개행 구분 리스트, 항목은 소문자로 (provider 이름 비교용)"""
    value = _raw(name)
    if value is None:
        return list(default_list)
    items = [item.strip().lower() for item in value.replace("\n", ",").split(",")]
    return [item for item in items if item] or list(default_list)


def env_float(name: str, default: float) -> float:
    return _parse_number(name, default, float)


def env_int(name: str, default: int) -> int:
    return _parse_number(name, default, int)
