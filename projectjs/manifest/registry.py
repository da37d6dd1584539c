"""
네임스페이스 선언으로부터 패키지 레지스트리를 생성하는 모듈
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple, Union

from .. import config
from ..common import CommonFunctions
from .errors import InvalidFieldError
from .models import Descriptor, RegistryOptions

logger = logging.getLogger(__name__)


def get_package_name(class_path: str) -> Optional[str]:
    """클래스 경로에서 패키지 이름 추출

    'a.b.Foo' -> 'a.b', 구분자가 없으면 None.
    """
    package, separator, _ = class_path.rpartition(config.PACKAGE_SEPARATOR)
    if not separator:
        return None
    return package


class NamespaceSource(Protocol):
    """레지스트리 생성에 필요한 디스크립터 접근 인터페이스"""

    def clone_namespace(self) -> Dict[str, Any]: ...

    def has_src_dir(self) -> bool: ...

    def get_src_dir(self) -> Optional[str]: ...


class DescriptorSource:
    """파싱된 project.json 딕셔너리를 NamespaceSource 로 감싸는 어댑터"""

    def __init__(self, data: Mapping):
        self._data = data

    def clone_namespace(self) -> Dict[str, Any]:
        return CommonFunctions.clone_data(self._data["namespace"])

    def has_src_dir(self) -> bool:
        return not CommonFunctions.is_blank(self._data.get("srcDir"))

    def get_src_dir(self) -> Optional[str]:
        return self._data["srcDir"] if self.has_src_dir() else None


class PackageRegistry:
    """패키지 이름 -> 클래스 경로 목록 (삽입 순서 유지)"""

    def __init__(self, namespace: Dict[str, Any], src_dir: Optional[str] = None,
                 options: Optional[RegistryOptions] = None):
        self.namespace = namespace
        self.src_dir = src_dir
        self.options = options or RegistryOptions()
        self._packages: Dict[str, List[str]] = {}

    def has(self, package: str) -> bool:
        return package in self._packages

    def get(self, package: str) -> Optional[List[str]]:
        return self._packages.get(package)

    def set(self, package: str, class_paths: List[str]) -> None:
        self._packages[package] = class_paths

    def packages(self) -> List[str]:
        return list(self._packages)

    def items(self) -> List[Tuple[str, List[str]]]:
        return list(self._packages.items())

    def get_package_classes(self, package: str) -> List[str]:
        """패키지에 속한 클래스 경로 목록 (없으면 빈 목록)"""
        return list(self._packages.get(package, []))

    def get_class_location(self, class_path: str) -> Any:
        """클래스의 소스 위치 (옵션에 따라 srcDir, 컴파일 접미사 적용)"""
        location = self.namespace.get("map", {}).get(class_path)
        if not isinstance(location, str):
            return location
        if self.options.add_src_dir and self.src_dir:
            location = os.path.join(self.src_dir, location)
        if self.options.add_compile_suffix:
            location += self.options.compile_suffix
        return location

    def to_dict(self) -> Dict[str, List[str]]:
        return {package: list(classes) for package, classes in self._packages.items()}

    def __contains__(self, package: str) -> bool:
        return self.has(package)

    def __iter__(self) -> Iterator[str]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __repr__(self) -> str:
        return f"PackageRegistry(packages={self.packages()!r})"


def resolve_options(options: Union[RegistryOptions, Mapping, None], has_src_dir: bool) -> RegistryOptions:
    """호출자가 지정한 옵션을 우선 적용하고 나머지는 기본값으로 채움

    키는 snake_case 입니다: add_src_dir, compile_suffix, add_compile_suffix.
    """
    if isinstance(options, RegistryOptions):
        return options
    options = options or {}
    if not isinstance(options, Mapping):
        raise TypeError(f"options는 map 또는 RegistryOptions 여야 합니다: {type(options).__name__}")
    return RegistryOptions(
        add_src_dir=options["add_src_dir"] if "add_src_dir" in options else has_src_dir,
        compile_suffix=options["compile_suffix"] if "compile_suffix" in options else config.DEFAULT_COMPILE_SUFFIX,
        add_compile_suffix=options["add_compile_suffix"] if "add_compile_suffix" in options else False,
    )


def create_registry(project: Union[NamespaceSource, Descriptor, Mapping],
                    options: Union[RegistryOptions, Mapping, None] = None) -> PackageRegistry:
    """디스크립터 또는 ProjectFile 로부터 PackageRegistry 생성"""
    if isinstance(project, Descriptor):
        project = project.to_dict()
    source = DescriptorSource(project) if isinstance(project, Mapping) else project

    namespace = source.clone_namespace()
    src_dir = source.get_src_dir() if source.has_src_dir() else None
    registry = PackageRegistry(namespace, src_dir, resolve_options(options, src_dir is not None))

    class_map = namespace.get("map")
    if not CommonFunctions.is_mapping(class_map):
        raise InvalidFieldError("namespace.map은 map이어야 합니다", "namespace.map")

    for class_path in class_map:
        package = get_package_name(class_path)
        if package is None:
            continue
        if registry.has(package):
            registry.get(package).append(class_path)
        else:
            registry.set(package, [class_path])

    logger.debug(f"레지스트리 생성: 패키지 {len(registry)}개, 클래스 {len(class_map)}개")
    return registry
