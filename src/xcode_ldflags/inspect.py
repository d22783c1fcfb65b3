"""
工程只读信息查看模块。

用于在不修改文件的情况下，列出各 target 及其 build configuration 的链接参数。
"""

from __future__ import annotations

from dataclasses import dataclass

from .project_io import load_project, resolve_pbxproj_path
from .project_walk import iter_build_configurations, list_targets
from .types import LDFLAGS_KEY


@dataclass(frozen=True)
class ConfigInfo:
    """单个 build configuration 的链接参数快照。"""

    name: str
    has_ldflags: bool
    ldflags: list[str] | str | None


@dataclass(frozen=True)
class TargetInfo:
    name: str
    isa: str
    configurations: list[ConfigInfo]


@dataclass(frozen=True)
class ProjectInfo:
    """工程关键信息快照。"""

    project_path: str
    targets: list[TargetInfo]

    def target(self, name: str) -> TargetInfo | None:
        for t in self.targets:
            if t.name == name:
                return t
        return None


def _ldflags_value(settings: object) -> tuple[bool, list[str] | str | None]:
    if LDFLAGS_KEY not in settings:
        return False, None
    value = settings[LDFLAGS_KEY]
    if isinstance(value, list):
        return True, [str(x) for x in value]
    return True, None if value is None else str(value)


def inspect_project(project_path: str) -> ProjectInfo:
    """读取工程并返回各 target 的链接参数信息。"""
    pbxproj_path = resolve_pbxproj_path(project_path)
    project = load_project(pbxproj_path)

    targets: list[TargetInfo] = []
    for target in list_targets(project):
        configs: list[ConfigInfo] = []
        for name, settings in iter_build_configurations(project, target):
            has, value = _ldflags_value(settings)
            configs.append(ConfigInfo(name=name, has_ldflags=has, ldflags=value))
        targets.append(
            TargetInfo(
                name=str(target["name"]) if "name" in target else "",
                isa=str(target["isa"]) if "isa" in target else "",
                configurations=configs,
            )
        )
    return ProjectInfo(project_path=pbxproj_path, targets=targets)


def _format_flags(cfg: ConfigInfo) -> str:
    if not cfg.has_ldflags:
        return "(not set)"
    if isinstance(cfg.ldflags, list):
        return " ".join(cfg.ldflags) if cfg.ldflags else "(empty)"
    return f"{cfg.ldflags!r} (not an array)"


def print_project_info(info: ProjectInfo) -> None:
    """以可读文本格式输出工程信息。"""
    print("Project Info:")
    print(f"  File                : {info.project_path}")
    if not info.targets:
        print("  Targets             : -")
        return
    print(f"  Targets             : {len(info.targets)}")
    for t in info.targets:
        print(f"    - {t.name} [{t.isa}]")
        if not t.configurations:
            print("        (no build configurations)")
        for cfg in t.configurations:
            print(f"        {cfg.name}: {LDFLAGS_KEY} = {_format_flags(cfg)}")
