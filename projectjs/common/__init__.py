"""
공통 기능 모듈
"""

from .common_functions import CommonFunctions

__all__ = [
    "CommonFunctions"
]
