"""
디스크립터 오류 정의

검증은 첫 번째 위반에서 즉시 중단되며, 각 오류는 문제가 된 필드 경로를 함께 가집니다.
"""

from typing import Optional


class DescriptorError(Exception):
    """project.json 처리 오류의 기본 클래스"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class EmptyInputError(DescriptorError, ValueError):
    """입력이 없거나 비어있음"""


class MissingFieldError(DescriptorError):
    """필수 필드 누락"""


class InvalidFieldError(DescriptorError):
    """필드는 있으나 형식이 잘못됨"""


class SchemaMismatchError(DescriptorError):
    """projectjs 용으로 작성되지 않은 디스크립터"""


class VersionMismatchError(DescriptorError):
    """더 최신 툴체인 용으로 작성된 디스크립터"""
