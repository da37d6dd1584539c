"""
project.json 파싱/검증 모듈

이 모듈은 project.json 디스크립터를 파싱하고 검증하여 패키지 레지스트리로 변환하는 기능을 제공합니다.
"""

from .errors import (
    DescriptorError,
    EmptyInputError,
    MissingFieldError,
    InvalidFieldError,
    SchemaMismatchError,
    VersionMismatchError
)

from .models import Descriptor, SchemaInfo, NamespaceInfo, RegistryOptions
from .project_file import ProjectFile
from .registry import (
    PackageRegistry,
    NamespaceSource,
    DescriptorSource,
    create_registry,
    get_package_name
)
from .validator import DescriptorValidator
from .parser import DescriptorParser

__all__ = [
    # Errors
    'DescriptorError',
    'EmptyInputError',
    'MissingFieldError',
    'InvalidFieldError',
    'SchemaMismatchError',
    'VersionMismatchError',

    # Models
    'Descriptor',
    'SchemaInfo',
    'NamespaceInfo',
    'RegistryOptions',
    'ProjectFile',

    # Registry
    'PackageRegistry',
    'NamespaceSource',
    'DescriptorSource',
    'create_registry',
    'get_package_name',

    # Validator / Parser
    'DescriptorValidator',
    'DescriptorParser'
]
