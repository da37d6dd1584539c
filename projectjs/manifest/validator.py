"""
project.json 디스크립터를 검증하는 Validator 클래스
"""

import logging
from typing import Any, Dict, Optional

from packaging.version import InvalidVersion

from .. import config
from ..common import CommonFunctions
from ..utils import version_compare
from .errors import (
    InvalidFieldError,
    MissingFieldError,
    SchemaMismatchError,
    VersionMismatchError,
)

logger = logging.getLogger(__name__)


class DescriptorValidator:
    """디스크립터 검증 클래스

    검사 순서 자체가 계약의 일부입니다. 여러 문제가 있는 디스크립터는 항상 먼저 검사되는
    항목의 오류로 실패합니다.
    """

    def __init__(self, tool_version: Optional[str] = None):
        self.schema_names = config.SCHEMA_NAMES
        self._tool_version = tool_version

    @property
    def tool_version(self) -> str:
        """비교 기준이 되는 툴체인 버전"""
        return self._tool_version or version_compare.get_own_version()

    def verify(self, document: Any) -> bool:
        """전체 디스크립터 검증 (실패 시 예외, 성공 시 True)"""
        schema = self._verify_schema(document)
        self._verify_version(schema["version"])
        namespace = self._verify_namespace(document)
        self._verify_optional_map(namespace, "dependencies")
        self._verify_optional_map(namespace, "aliases")
        self._verify_optional_string(document, "srcDir")
        self._verify_optional_string(document, "buildDir")

        logger.debug(f"디스크립터 검증 통과: {schema['name']} {schema['version']}")
        return True

    def _verify_schema(self, document: Any) -> Dict[str, Any]:
        """schema 블록 검증"""
        if not CommonFunctions.is_mapping(document) or "schema" not in document:
            raise MissingFieldError("Project schema가 정의되지 않았습니다", "schema")

        schema = document["schema"]
        if not CommonFunctions.is_mapping(schema):
            schema = {}
        if CommonFunctions.is_blank(schema.get("name")):
            raise InvalidFieldError("Project schema name이 정의되지 않았습니다", "schema.name")
        if CommonFunctions.is_blank(schema.get("version")):
            raise InvalidFieldError("Project schema version이 정의되지 않았습니다", "schema.version")

        if schema["name"] not in self.schema_names:
            raise SchemaMismatchError(
                f"Schema 불일치 -- projectjs 용으로 생성된 프로젝트가 아닙니다: {schema['name']!r}",
                "schema.name",
            )
        return schema

    def _verify_version(self, declared: Any) -> None:
        """툴체인 버전 호환성 검증"""
        if not isinstance(declared, str):
            raise InvalidFieldError(f"schema.version은 문자열이어야 합니다: {declared!r}", "schema.version")

        tool_version = self.tool_version
        if version_compare.matches(tool_version, declared):
            return
        try:
            ordering = version_compare.compare(tool_version, declared)
        except InvalidVersion as e:
            raise InvalidFieldError(
                f"schema.version을 버전으로 해석할 수 없습니다: {declared!r}", "schema.version"
            ) from e
        if ordering < 0:
            raise VersionMismatchError(
                f"Schema version 불일치 -- 이후 버전의 projectjs 용으로 생성된 프로젝트입니다 "
                f"(요구: {declared}, 현재: {tool_version})",
                "schema.version",
            )

    def _verify_namespace(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """namespace 블록 검증"""
        if "namespace" not in document:
            raise MissingFieldError("Namespace가 정의되지 않았습니다", "namespace")

        namespace = document["namespace"]
        if not CommonFunctions.is_mapping(namespace):
            namespace = {}
        if CommonFunctions.is_blank(namespace.get("base")):
            raise MissingFieldError("namespace.base가 정의되지 않았습니다", "namespace.base")
        if "map" not in namespace:
            raise MissingFieldError("namespace.map이 정의되지 않았습니다", "namespace.map")
        return namespace

    def _verify_optional_map(self, namespace: Dict[str, Any], key: str) -> None:
        if key in namespace and not CommonFunctions.is_mapping(namespace[key]):
            raise InvalidFieldError(f"namespace.{key}는 map이어야 합니다", f"namespace.{key}")

    def _verify_optional_string(self, document: Dict[str, Any], key: str) -> None:
        value = document.get(key)
        if value is not None and not isinstance(value, str):
            raise InvalidFieldError(f"{key}를 정의한 경우 문자열이어야 합니다", key)
