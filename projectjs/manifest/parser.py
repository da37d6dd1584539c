"""
project.json 파일을 파싱하고 검증하여 사용 가능한 형태로 돌려주는 Parser 클래스
"""

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .. import config
from ..common import CommonFunctions
from ..utils import version_compare
from .errors import DescriptorError, EmptyInputError
from .models import Descriptor, RegistryOptions
from .project_file import ProjectFile
from .registry import NamespaceSource, PackageRegistry, create_registry
from .validator import DescriptorValidator

logger = logging.getLogger(__name__)


class DescriptorParser:
    """project.json 파싱/검증 클래스"""

    def __init__(self, validator: Optional[DescriptorValidator] = None):
        self.validator = validator or DescriptorValidator()

    def parse(self, text: Union[str, bytes, None]) -> Any:
        """JSON 문자열 파싱 (형태는 검증하지 않음)"""
        if CommonFunctions.is_blank(text):
            raise EmptyInputError("project.json이 비어있습니다")
        return json.loads(text)

    def verify(self, document: Any) -> bool:
        """디스크립터 검증 (실패 시 예외)"""
        return self.validator.verify(document)

    def create_registry(self, project: Union[NamespaceSource, Descriptor, Mapping],
                        options: Union[RegistryOptions, Mapping, None] = None) -> PackageRegistry:
        """디스크립터 또는 ProjectFile 로부터 PackageRegistry 생성"""
        return create_registry(project, options)

    @CommonFunctions.log_operation(logger, "레지스트리 로드")
    def load_registry(self, file_path: str) -> Optional[PackageRegistry]:
        """project.json 파일에서 레지스트리 로드"""
        document = self._load_document(file_path)
        if self.verify(document):
            return self.create_registry(document, {})
        return None

    @CommonFunctions.log_operation(logger, "프로젝트 파일 로드")
    def load_project_file(self, file_path: str) -> Optional[ProjectFile]:
        """project.json 파일에서 ProjectFile 로드"""
        document = self._load_document(file_path)
        if self.verify(document):
            return ProjectFile(document, root_dir=os.path.dirname(file_path))
        return None

    def validate_file(self, file_path: str) -> Tuple[bool, List[str]]:
        """파일의 project.json 유효성 검사 (예외 대신 오류 메시지 목록 반환)"""
        try:
            self.verify(self._load_document(file_path))
            return True, []
        except DescriptorError as e:
            return False, [f"{e.field}: {e.message}" if e.field else e.message]
        except json.JSONDecodeError as e:
            return False, [f"JSON 파싱 오류: {e}"]
        except UnicodeDecodeError as e:
            return False, [f"UTF-8 텍스트가 아닙니다: {e}"]
        except OSError as e:
            return False, [f"파일을 읽을 수 없습니다: {e}"]

    def create_template(self, base: str, start: Optional[str] = None) -> Dict[str, Any]:
        """현재 툴체인 버전용 템플릿 디스크립터 생성"""
        template = {
            "schema": {
                "name": config.TEMPLATE_SCHEMA_NAME,
                "version": version_compare.get_own_version()
            },
            "namespace": {
                "base": base,
                "map": {}
            },
            "srcDir": None,
            "buildDir": config.DEFAULT_BUILD_DIR
        }
        if start:
            template["start"] = start

        self.verify(template)
        return template

    def _load_document(self, file_path: str) -> Any:
        logger.info(f"project.json 로드: {file_path}")
        return self.parse(CommonFunctions.read_text_file(file_path))
