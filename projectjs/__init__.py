"""
projectjs 모듈

project.json 디스크립터를 읽고 검증하여 컴파일러가 사용할 패키지 레지스트리를 만듭니다.
"""

__version__ = "1.0.0"
__author__ = "projectjs Team"
__description__ = "project.json 디스크립터 파싱/검증 및 패키지 레지스트리"

from .manifest import (
    DescriptorParser,
    DescriptorValidator,
    PackageRegistry,
    ProjectFile,
    RegistryOptions,
)

__all__ = [
    "DescriptorParser",
    "DescriptorValidator",
    "PackageRegistry",
    "ProjectFile",
    "RegistryOptions",
]
