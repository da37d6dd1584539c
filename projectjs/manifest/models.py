"""
project.json 디스크립터와 레지스트리 옵션의 데이터 구조를 정의하는 모델들
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import config


class SchemaInfo(BaseModel):
    """디스크립터를 작성한 도구와 버전"""
    name: str = Field(..., description="도구 식별자 (projectjs 또는 project.js)")
    version: str = Field(..., description="요구하는 툴체인 버전")


class NamespaceInfo(BaseModel):
    """네임스페이스 선언"""
    base: str = Field(..., description="기본 네임스페이스")
    map: Dict[str, Any] = Field(..., description="클래스 경로 -> 소스 위치")
    dependencies: Optional[Dict[str, Any]] = Field(None, description="외부 의존성")
    aliases: Optional[Dict[str, Any]] = Field(None, description="클래스 별칭")

    @field_validator('base')
    @classmethod
    def validate_base(cls, v):
        if not v:
            raise ValueError('namespace.base는 비어있을 수 없습니다')
        return v


class Descriptor(BaseModel):
    """검증된 project.json 전체를 나타내는 모델"""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    schema_info: SchemaInfo = Field(..., alias="schema", description="스키마 정보")
    namespace: NamespaceInfo = Field(..., description="네임스페이스 선언")
    src_dir: Optional[str] = Field(None, alias="srcDir", description="소스 디렉토리")
    build_dir: Optional[str] = Field(None, alias="buildDir", description="빌드 출력 디렉토리")
    start: Optional[str] = Field(None, description="시작 클래스 이름")

    @field_validator('schema_info')
    @classmethod
    def validate_schema_name(cls, v):
        if v.name not in config.SCHEMA_NAMES:
            raise ValueError(f'projectjs 스키마가 아닙니다: {v.name}')
        return v

    def to_dict(self) -> dict:
        """project.json 형태의 딕셔너리로 변환"""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict) -> 'Descriptor':
        """딕셔너리에서 Descriptor 객체 생성"""
        return cls.model_validate(data)


@dataclass
class RegistryOptions:
    """레지스트리 생성 옵션"""
    add_src_dir: bool = False
    compile_suffix: str = config.DEFAULT_COMPILE_SUFFIX
    add_compile_suffix: bool = False
