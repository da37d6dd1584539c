#!/usr/bin/env python3
"""
패키지 레지스트리 테스트

네임스페이스 맵에서 패키지 그룹을 만드는 과정과 옵션 기본값을 테스트합니다.
"""

import copy
import os

import pytest

from projectjs.manifest import (
    Descriptor,
    InvalidFieldError,
    PackageRegistry,
    ProjectFile,
    RegistryOptions,
    create_registry,
    get_package_name,
)

DESCRIPTOR = {
    "schema": {"name": "projectjs", "version": "1.0.0"},
    "namespace": {
        "base": "a",
        "map": {
            "a.b.Foo": "b/foo.js",
            "a.c.Baz": "c/baz.js",
            "a.b.Bar": "b/bar.js",
            "Standalone": "standalone.js",
        },
    },
}


@pytest.mark.parametrize("class_path, package", [
    ("a.b.Foo", "a.b"),
    ("a.Foo", "a"),
    ("Foo", None),
    (".Foo", ""),
])
def test_get_package_name(class_path, package):
    assert get_package_name(class_path) == package


def test_groups_classes_by_package_in_order():
    registry = create_registry(DESCRIPTOR)

    assert registry.packages() == ["a.b", "a.c"]
    assert registry.get("a.b") == ["a.b.Foo", "a.b.Bar"]
    assert registry.get("a.c") == ["a.c.Baz"]
    assert "Standalone" not in registry
    assert registry.get("Standalone") is None
    assert len(registry) == 2


def test_every_class_in_exactly_one_package():
    registry = create_registry(DESCRIPTOR)
    listed = [class_path for _, classes in registry.items() for class_path in classes]
    assert sorted(listed) == ["a.b.Bar", "a.b.Foo", "a.c.Baz"]


def test_idempotent():
    assert create_registry(DESCRIPTOR).to_dict() == create_registry(DESCRIPTOR).to_dict()


def test_does_not_mutate_descriptor():
    data = copy.deepcopy(DESCRIPTOR)
    registry = create_registry(data)
    registry.namespace["map"]["a.b.New"] = "new.js"
    registry.get("a.b").append("a.b.New")

    assert data == DESCRIPTOR


def test_default_options_without_src_dir():
    registry = create_registry(DESCRIPTOR)
    assert registry.src_dir is None
    assert registry.options == RegistryOptions(add_src_dir=False, compile_suffix=".tmp",
                                               add_compile_suffix=False)


def test_default_options_with_src_dir():
    registry = create_registry(dict(DESCRIPTOR, srcDir="src"))
    assert registry.src_dir == "src"
    assert registry.options.add_src_dir is True


def test_empty_src_dir_is_ignored():
    registry = create_registry(dict(DESCRIPTOR, srcDir=""))
    assert registry.src_dir is None
    assert registry.options.add_src_dir is False


def test_add_compile_suffix_uses_default_suffix():
    registry = create_registry(DESCRIPTOR, {"add_compile_suffix": True})
    assert registry.options.add_compile_suffix is True
    assert registry.options.compile_suffix == ".tmp"


def test_explicit_options_win():
    registry = create_registry(dict(DESCRIPTOR, srcDir="src"),
                               {"add_src_dir": False, "compile_suffix": ".js"})
    assert registry.options == RegistryOptions(add_src_dir=False, compile_suffix=".js",
                                               add_compile_suffix=False)


def test_options_instance_used_as_given():
    options = RegistryOptions(add_src_dir=True, compile_suffix=".out", add_compile_suffix=True)
    assert create_registry(DESCRIPTOR, options).options is options


def test_class_location():
    registry = create_registry(dict(DESCRIPTOR, srcDir="src"),
                               {"add_compile_suffix": True, "compile_suffix": ".c"})
    assert registry.get_class_location("a.b.Foo") == os.path.join("src", "b/foo.js") + ".c"
    assert registry.get_class_location("missing.Class") is None

    plain = create_registry(DESCRIPTOR)
    assert plain.get_class_location("a.b.Foo") == "b/foo.js"


def test_from_project_file(tmp_path):
    data = dict(copy.deepcopy(DESCRIPTOR), srcDir="src")
    project = ProjectFile(data, root_dir=str(tmp_path))

    registry = create_registry(project)

    assert registry.get("a.b") == ["a.b.Foo", "a.b.Bar"]
    assert registry.src_dir == os.path.join(str(tmp_path), "src")
    assert registry.options.add_src_dir is True
    registry.namespace["map"].clear()
    assert project.get_map() == DESCRIPTOR["namespace"]["map"]


def test_non_mapping_namespace_map():
    data = copy.deepcopy(DESCRIPTOR)
    data["namespace"]["map"] = ["a.b.Foo"]
    with pytest.raises(InvalidFieldError):
        create_registry(data)


def test_registry_accessors():
    registry = PackageRegistry({"map": {}})
    registry.set("x", ["x.A"])
    assert registry.has("x")
    assert list(registry) == ["x"]
    assert registry.get_package_classes("x") == ["x.A"]
    assert registry.get_package_classes("y") == []


def test_from_descriptor_model():
    descriptor = Descriptor.from_dict(dict(copy.deepcopy(DESCRIPTOR), srcDir="src"))

    registry = create_registry(descriptor)

    assert registry.get("a.b") == ["a.b.Foo", "a.b.Bar"]
    assert registry.src_dir == "src"
    assert registry.options.add_src_dir is True


@pytest.mark.parametrize("options", ["add_src_dir", ["add_compile_suffix"], 1])
def test_non_mapping_options_rejected(options):
    with pytest.raises(TypeError):
        create_registry(DESCRIPTOR, options)
