#!/usr/bin/env python3
"""
ProjectFile 테스트
"""

import json
import os

import pytest
from pydantic import ValidationError

from projectjs.manifest import Descriptor, DescriptorParser, ProjectFile

DATA = {
    "schema": {"name": "project.js", "version": "1.0.0"},
    "namespace": {
        "base": "ns",
        "map": {"ns.App": "app.js"},
        "dependencies": {"lib": "libs/lib.js"},
    },
    "srcDir": "src",
    "start": "ns.App",
}


@pytest.fixture
def project(tmp_path):
    return ProjectFile(json.loads(json.dumps(DATA)), root_dir=str(tmp_path))


def test_accessors(project, tmp_path):
    assert project.get_schema_name() == "project.js"
    assert project.get_schema_version() == "1.0.0"
    assert project.get_base_namespace() == "ns"
    assert project.get_map() == {"ns.App": "app.js"}
    assert project.get_dependencies() == {"lib": "libs/lib.js"}
    assert project.get_aliases() == {}
    assert project.has_src_dir() is True
    assert project.get_src_dir() == os.path.join(str(tmp_path), "src")
    assert project.has_build_dir() is False
    assert project.get_build_dir() == os.path.join(str(tmp_path), "build")
    assert project.get_start() == "ns.App"


def test_clone_namespace_is_deep_copy(project):
    namespace = project.clone_namespace()
    namespace["map"]["ns.Other"] = "other.js"
    namespace["dependencies"]["lib"] = "changed"

    assert project.get_map() == {"ns.App": "app.js"}
    assert project.get_dependencies() == {"lib": "libs/lib.js"}


def test_without_src_dir():
    project = ProjectFile({"namespace": {"base": "ns", "map": {}}, "srcDir": None})
    assert project.has_src_dir() is False
    assert project.get_src_dir() is None


def test_to_descriptor(project):
    descriptor = project.to_descriptor()
    assert isinstance(descriptor, Descriptor)
    assert descriptor.schema_info.name == "project.js"
    assert descriptor.namespace.map == {"ns.App": "app.js"}
    assert descriptor.src_dir == "src"
    assert descriptor.to_dict()["srcDir"] == "src"


def test_descriptor_model_rejects_foreign_schema():
    with pytest.raises(ValidationError):
        Descriptor.from_dict(dict(DATA, schema={"name": "other", "version": "1.0.0"}))


def test_save_and_reload(project, tmp_path):
    path = project.save()
    assert path == os.path.join(str(tmp_path), "project.json")

    reloaded = DescriptorParser().load_project_file(path)
    assert reloaded.get_data() == DATA
