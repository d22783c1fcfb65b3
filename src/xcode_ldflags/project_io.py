"""
`project.pbxproj` 读写工具。

设计原则：
- 既接受 `.xcodeproj` 目录，也接受直接指向 `project.pbxproj` 的路径。
- 解析失败统一转换为 `ProjectLoadError`，不做重试。
"""

from __future__ import annotations

import os

from pbxproj import XcodeProject

from .types import ProjectLoadError

PBXPROJ_NAME = "project.pbxproj"


def resolve_pbxproj_path(path: str) -> str:
    """把 `.xcodeproj` 目录或 `project.pbxproj` 路径统一解析为 pbxproj 文件路径。"""
    p = os.path.abspath(os.path.expanduser(path))
    if os.path.isdir(p):
        p = os.path.join(p, PBXPROJ_NAME)
    if not os.path.isfile(p):
        raise ProjectLoadError(f"project file not found: {p}")
    return p


def load_project(path: str) -> XcodeProject:
    """从磁盘读取并解析工程描述文件。"""
    pbxproj_path = resolve_pbxproj_path(path)
    try:
        project = XcodeProject.load(pbxproj_path)
    except OSError as e:
        raise ProjectLoadError(f"failed to read {pbxproj_path}: {e}") from e
    except Exception as e:
        # openstep 解析器对语法错误只抛出通用 Exception。
        raise ProjectLoadError(f"failed to parse {pbxproj_path}: {e}") from e
    if "objects" not in project or "rootObject" not in project:
        raise ProjectLoadError(f"not an Xcode project (missing objects/rootObject): {pbxproj_path}")
    return project


def save_project(project: XcodeProject) -> None:
    """将工程写回其加载时的路径（覆盖原文件）。"""
    project.save()
