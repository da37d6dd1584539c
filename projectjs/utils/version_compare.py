"""
버전 비교 유틸리티

툴체인 버전과 project.json 에 선언된 버전을 비교합니다.
"""

import re
from typing import Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

WILDCARDS = ("x", "X", "*")
SPECIFIER_PREFIXES = ("<", ">", "=", "!", "~=")

_VERSION_PATTERN = re.compile(r"\d+(?:\.(?:\d+|[xX*]))*")


def get_own_version() -> str:
    """실행 중인 툴체인 자신의 버전"""
    from .. import __version__
    return __version__


def parse_version(text: str) -> Version:
    """문자열을 Version 으로 변환

    PEP 440 형식이 아니면 문자열 안의 첫 번째 숫자 버전을 사용하며, 와일드카드 자리는 0으로 취급합니다.
    """
    if not isinstance(text, str):
        raise InvalidVersion(f"버전은 문자열이어야 합니다: {text!r}")
    text = text.strip()
    try:
        return Version(text)
    except InvalidVersion:
        match = _VERSION_PATTERN.search(text)
        if match is None:
            raise
        segments = ["0" if seg in WILDCARDS else seg for seg in match.group(0).split(".")]
        return Version(".".join(segments))


def compare(version_a: str, version_b: str) -> int:
    """두 버전 비교 (a < b 이면 -1, 같으면 0, a > b 이면 1)"""
    a = parse_version(version_a)
    b = parse_version(version_b)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def matches(version: str, pattern: str) -> bool:
    """버전이 패턴을 만족하는지 확인

    지원 패턴:
        1.2.3        정확히 일치 (1.2 == 1.2.0)
        1.x, 1.2.*   와일드카드
        ^1.2.3       같은 메이저 버전 내에서 1.2.3 이상
        ~1.2.3       같은 마이너 버전 내에서 1.2.3 이상
        >=1.0,<2.0   PEP 440 specifier
    """
    if not isinstance(pattern, str) or not pattern.strip():
        return False
    pattern = pattern.strip()
    current = Version(version)

    if pattern.startswith("^") or (pattern.startswith("~") and not pattern.startswith("~=")):
        try:
            lower, upper = _range_bounds(pattern)
        except InvalidVersion:
            return False
        return lower <= current < upper

    if pattern.startswith(SPECIFIER_PREFIXES):
        try:
            return SpecifierSet(pattern).contains(current, prereleases=True)
        except InvalidSpecifier:
            return False

    segments = pattern.split(".")
    if any(seg in WILDCARDS for seg in segments):
        return _matches_wildcard(current, segments)

    try:
        return current == Version(pattern)
    except InvalidVersion:
        return False


def _range_bounds(pattern: str) -> Tuple[Version, Version]:
    """^ / ~ 범위의 하한과 상한 계산"""
    lower = parse_version(pattern[1:])
    release = lower.release + (0, 0)
    major, minor = release[0], release[1]
    if pattern.startswith("~"):
        return lower, Version(f"{major}.{minor + 1}")
    if major == 0:
        return lower, Version(f"0.{minor + 1}")
    return lower, Version(f"{major + 1}")


def _matches_wildcard(current: Version, segments) -> bool:
    release = current.release
    for index, seg in enumerate(segments):
        if seg in WILDCARDS:
            return True
        if not seg.isdigit():
            return False
        actual = release[index] if index < len(release) else 0
        if int(seg) != actual:
            return False
    return True
