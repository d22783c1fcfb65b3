from __future__ import annotations

"""
Linker flag patching pipeline.

High-level flow:
1) Load `project.pbxproj` (accepts the `.xcodeproj` directory as well).
2) Find the target by exact name; stop without touching the file if absent.
3) For every build configuration of that target, drop the given tokens from
   `OTHER_LDFLAGS` (token-wise, order preserved). Configurations without the
   key, or with a non-array value, are left alone.
4) Save the project back to the same path (always, unless dry-run).
"""

from collections.abc import Sequence

from .flag_edit import remove_flag_tokens
from .project_io import load_project, resolve_pbxproj_path, save_project
from .project_walk import find_target, iter_build_configurations, target_names
from .types import (
    DEFAULT_TARGET,
    DEFAULT_TOKENS,
    LDFLAGS_KEY,
    ConfigChange,
    PatchReport,
    TargetNotFoundError,
)


def _snapshot(value: object) -> list[str] | str | None:
    if isinstance(value, list):
        return [str(x) for x in value]
    if value is None:
        return None
    return str(value)


def _patch_settings(name: str, settings: object, tokens: Sequence[str]) -> ConfigChange:
    if LDFLAGS_KEY not in settings:
        return ConfigChange(name=name, status="missing")

    flags = settings[LDFLAGS_KEY]
    before = _snapshot(flags)
    removed = remove_flag_tokens(flags, tokens)
    if removed is None:
        return ConfigChange(name=name, status="not-a-list", before=before, after=before)

    # 数组已原地修改，对象图中引用的就是同一个列表，无需写回 settings。
    return ConfigChange(
        name=name,
        status="patched" if removed else "unchanged",
        before=before,
        after=_snapshot(flags),
        removed=removed,
    )


def patch_linker_flags(
    project_path: str,
    *,
    target_name: str = DEFAULT_TARGET,
    tokens: Sequence[str] = DEFAULT_TOKENS,
    configurations: Sequence[str] = (),
    dry_run: bool = False,
    verbose: bool = False,
) -> PatchReport:
    if not tokens:
        raise ValueError("no linker flag tokens to remove")

    pbxproj_path = resolve_pbxproj_path(project_path)
    project = load_project(pbxproj_path)

    target = find_target(project, target_name)
    if target is None:
        raise TargetNotFoundError(target_name, target_names(project))

    report = PatchReport(
        project_path=pbxproj_path,
        target_name=target_name,
        tokens=tuple(tokens),
        dry_run=dry_run,
    )
    only = set(configurations)
    for name, settings in iter_build_configurations(project, target):
        if only and name not in only:
            change = ConfigChange(name=name, status="skipped")
        else:
            change = _patch_settings(name, settings, tokens)
        report.changes.append(change)
        if verbose:
            if change.removed:
                print(f"  {name}: removed {' '.join(change.removed)}")
            else:
                print(f"  {name}: {change.status}")

    if dry_run:
        return report

    save_project(project)
    report.saved = True
    return report
