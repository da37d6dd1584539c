"""
유틸리티 모듈

버전 비교 등의 유틸리티 기능을 제공합니다.
"""

from .version_compare import compare, matches, get_own_version, parse_version

__all__ = [
    "compare",
    "matches",
    "get_own_version",
    "parse_version"
]
