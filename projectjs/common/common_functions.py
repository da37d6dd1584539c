"""
공통 함수 모듈

디스크립터 파싱/검증 과정에서 공통으로 사용되는 함수들을 모아놓은 모듈입니다.
"""

import copy
import functools
import logging
import time
from collections.abc import Mapping, Sized
from typing import Any

from .. import config


class CommonFunctions:
    """공통 함수 클래스"""

    @staticmethod
    def read_text_file(file_path: str, encoding: str = config.FILE_ENCODING) -> str:
        """텍스트 파일 읽기 (읽을 수 없으면 OSError 가 그대로 전파됨)"""
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()

    @staticmethod
    def is_blank(value: Any) -> bool:
        """값이 비어있는지 확인

        None, 길이가 0인 값, 길이를 갖지 않는 스칼라(숫자, 불리언)는 모두 비어있는 것으로 봅니다.
        """
        if value is None:
            return True
        if isinstance(value, Sized):
            return len(value) == 0
        return True

    @staticmethod
    def is_mapping(value: Any) -> bool:
        """매핑(JSON 객체) 여부 확인"""
        return isinstance(value, Mapping)

    @staticmethod
    def clone_data(data: Any) -> Any:
        """중첩 데이터 깊은 복사"""
        return copy.deepcopy(data)

    @staticmethod
    def log_operation(logger: logging.Logger, operation_name: str,
                      start_message: str = None, end_message: str = None):
        """작업 로깅 데코레이터"""
        def decorator(func):
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                logger.info(f"시작: {start_message or operation_name}")

                start_time = time.time()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    elapsed_time = time.time() - start_time
                    logger.error(f"실패: {operation_name} (소요시간: {elapsed_time:.2f}초) - {e}")
                    raise

                elapsed_time = time.time() - start_time
                logger.info(f"완료: {end_message or operation_name} (소요시간: {elapsed_time:.2f}초)")
                return result

            return wrapper
        return decorator
