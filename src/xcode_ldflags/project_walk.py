"""
在已解析的工程对象图中查找 target 与 build configuration。

对象图结构：
  rootObject -> PBXProject.targets[] -> target.buildConfigurationList
  -> XCConfigurationList.buildConfigurations[] -> XCBuildConfiguration.buildSettings
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .types import ProjectLoadError


def _root_object(project: Any) -> Any:
    objects = project["objects"]
    root = objects[project["rootObject"]]
    if root is None:
        raise ProjectLoadError(f"rootObject {project['rootObject']} not present in objects")
    return root


def _name_of(obj: Any) -> str:
    if "name" in obj:
        return str(obj["name"])
    if "productName" in obj:
        return str(obj["productName"])
    return ""


def list_targets(project: Any) -> list[Any]:
    """按 `PBXProject.targets` 的顺序返回全部 target 对象。"""
    objects = project["objects"]
    root = _root_object(project)
    if "targets" not in root:
        return []
    out: list[Any] = []
    for pointer in root["targets"]:
        target = objects[pointer]
        if target is not None:
            out.append(target)
    return out


def target_names(project: Any) -> list[str]:
    return [_name_of(t) for t in list_targets(project)]


def find_target(project: Any, name: str) -> Any | None:
    """按名称精确匹配 target，找不到时返回 `None`。"""
    for target in list_targets(project):
        if "name" in target and target["name"] == name:
            return target
    return None


def iter_build_configurations(project: Any, target: Any) -> Iterator[tuple[str, Any]]:
    """依次产出 target 上每个 build configuration 的 `(name, buildSettings)`。"""
    if "buildConfigurationList" not in target:
        return
    objects = project["objects"]
    config_list = objects[target["buildConfigurationList"]]
    if config_list is None or "buildConfigurations" not in config_list:
        return
    for pointer in config_list["buildConfigurations"]:
        config = objects[pointer]
        if config is None or "buildSettings" not in config:
            continue
        yield _name_of(config), config["buildSettings"]
