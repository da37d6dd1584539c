"""
검증된 project.json 과 루트 디렉토리를 함께 다루는 ProjectFile 클래스
"""

import json
import os
from typing import Any, Dict, Optional

from .. import config
from ..common import CommonFunctions
from .models import Descriptor


class ProjectFile:
    """프로젝트 파일 어댑터

    레지스트리 생성기는 clone_namespace, has_src_dir, get_src_dir 만 사용합니다.
    """

    def __init__(self, data: Dict[str, Any], root_dir: str = ""):
        self._data = data
        self._root_dir = root_dir

    def get_root_dir(self) -> str:
        return self._root_dir

    def get_data(self) -> Dict[str, Any]:
        """디스크립터 원본의 복사본"""
        return CommonFunctions.clone_data(self._data)

    def get_schema_name(self) -> str:
        return self._data["schema"]["name"]

    def get_schema_version(self) -> str:
        return self._data["schema"]["version"]

    def clone_namespace(self) -> Dict[str, Any]:
        """namespace 블록 깊은 복사"""
        return CommonFunctions.clone_data(self._data["namespace"])

    def get_base_namespace(self) -> str:
        return self._data["namespace"]["base"]

    def get_map(self) -> Dict[str, Any]:
        return CommonFunctions.clone_data(self._data["namespace"]["map"])

    def get_dependencies(self) -> Dict[str, Any]:
        return CommonFunctions.clone_data(self._data["namespace"].get("dependencies") or {})

    def get_aliases(self) -> Dict[str, Any]:
        return CommonFunctions.clone_data(self._data["namespace"].get("aliases") or {})

    def has_src_dir(self) -> bool:
        return not CommonFunctions.is_blank(self._data.get("srcDir"))

    def get_src_dir(self) -> Optional[str]:
        """루트 디렉토리 기준 소스 디렉토리 경로"""
        if not self.has_src_dir():
            return None
        return os.path.join(self._root_dir, self._data["srcDir"])

    def has_build_dir(self) -> bool:
        return not CommonFunctions.is_blank(self._data.get("buildDir"))

    def get_build_dir(self) -> str:
        """루트 디렉토리 기준 빌드 디렉토리 경로 (미지정 시 기본값)"""
        build_dir = self._data["buildDir"] if self.has_build_dir() else config.DEFAULT_BUILD_DIR
        return os.path.join(self._root_dir, build_dir)

    def get_start(self) -> Optional[str]:
        return self._data.get("start")

    def to_descriptor(self) -> Descriptor:
        """타입이 지정된 Descriptor 모델로 변환"""
        return Descriptor.from_dict(self._data)

    def save(self, file_path: Optional[str] = None) -> str:
        """project.json 으로 저장하고 저장한 경로를 반환"""
        file_path = file_path or os.path.join(self._root_dir, config.PROJECT_FILE_NAME)
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(file_path, 'w', encoding=config.FILE_ENCODING) as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
        return file_path

    def __repr__(self) -> str:
        return f"ProjectFile(base={self.get_base_namespace()!r}, root_dir={self._root_dir!r})"
