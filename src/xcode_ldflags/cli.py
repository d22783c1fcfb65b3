"""
`xcode-ldflags` 的命令行入口模块。

负责解析工程路径、target 与待删除的链接参数，并调用 `xcode_ldflags.patcher.patch_linker_flags`。
"""

import argparse
import os
import sys
from collections.abc import Sequence

from .inspect import inspect_project, print_project_info
from .patcher import patch_linker_flags
from .types import DEFAULT_TARGET, DEFAULT_TOKENS, ProjectLoadError, TargetNotFoundError

# 历史默认位置：Flutter 工程中的 iOS 宿主工程。
DEFAULT_PROJECT = os.path.join("ios", "Runner.xcodeproj")


def _log_step(message: str) -> None:
    """输出简洁的流程阶段提示。"""
    print(f"[xcode-ldflags] {message}")


def _choose_candidate(*, candidates: list[str], context: str) -> str:
    """当候选有多个时，交互式让用户选择；非交互环境则报错。"""
    ordered = sorted(os.path.abspath(x) for x in candidates)
    if not sys.stdin.isatty():
        names = ", ".join(os.path.basename(x) for x in ordered)
        raise SystemExit(
            f"Error: multiple .xcodeproj found {context} in non-interactive mode.\n"
            f"Candidates: {names}\n"
            "Please pass the desired one via -p/--project.\n"
        )

    print(f"Multiple .xcodeproj found {context}. Please choose one:")
    for i, path in enumerate(ordered, start=1):
        print(f"  {i}) {path}")

    while True:
        raw = input(f"Select .xcodeproj [1-{len(ordered)}]: ").strip()
        if raw.isdigit():
            idx = int(raw)
            if 1 <= idx <= len(ordered):
                selected = ordered[idx - 1]
                print(f"Selected .xcodeproj: {selected}")
                return selected
        print("Invalid selection. Please enter a valid number.")


def _scan_xcodeproj(parent: str) -> list[str]:
    if not os.path.isdir(parent):
        return []
    out: list[str] = []
    with os.scandir(parent) as it:
        for entry in it:
            if entry.is_dir() and entry.name.endswith(".xcodeproj"):
                out.append(entry.path)
    return out


def _find_project_in_cwd() -> str:
    """在当前工作目录（及其 `ios/` 子目录）自动发现工程。"""
    cwd = os.getcwd()
    preferred = os.path.join(cwd, DEFAULT_PROJECT)
    if os.path.isdir(preferred):
        return preferred

    for parent, context in ((cwd, "in current directory"), (os.path.join(cwd, "ios"), "under ios/")):
        candidates = _scan_xcodeproj(parent)
        if len(candidates) == 1:
            return os.path.abspath(candidates[0])
        if len(candidates) > 1:
            return _choose_candidate(candidates=candidates, context=context)
    raise SystemExit(
        f"Error: missing -p/--project and no .xcodeproj found (looked for {DEFAULT_PROJECT}).\n"
        "Hint: pass the .xcodeproj directory or project.pbxproj path via -p.\n"
    )


def build_parser() -> argparse.ArgumentParser:
    """构建并返回 `xcode-ldflags` 命令行参数解析器。"""
    p = argparse.ArgumentParser(
        prog="xcode-ldflags",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Remove linker flag tokens from OTHER_LDFLAGS of every build configuration\n"
            f"of an Xcode target (default: drop {' '.join(DEFAULT_TOKENS)} from {DEFAULT_TARGET})."
        ),
    )

    p.add_argument(
        "-p",
        "--project",
        default="",
        help=f".xcodeproj directory or project.pbxproj path (default: {DEFAULT_PROJECT})",
    )
    p.add_argument("-t", "--target", default=DEFAULT_TARGET, help="Target name (exact match)")
    p.add_argument(
        "-f",
        "--flag",
        action="append",
        default=[],
        metavar="TOKEN",
        help=(
            "Linker flag token to remove; repeatable, use --flag=-TOKEN for dash tokens\n"
            f"(default: {' '.join(DEFAULT_TOKENS)})"
        ),
    )
    p.add_argument(
        "-c",
        "--configuration",
        action="append",
        default=[],
        metavar="NAME",
        help="Only patch this build configuration; repeatable (default: all)",
    )
    p.add_argument(
        "--inspect",
        action="store_true",
        help="Only list targets and their OTHER_LDFLAGS without modifying the project",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview which tokens would be removed without writing the project",
    )
    p.add_argument("--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 入口：解析参数、定位工程并执行 patch；target 不存在时返回 1。"""
    parser = build_parser()
    ns = parser.parse_args(argv)
    if ns.inspect and ns.dry_run:
        raise SystemExit("Error: --inspect and --dry-run cannot be used together.")

    _log_step("Resolving project")
    if ns.project:
        project = os.path.abspath(os.path.expanduser(ns.project))
        _log_step(f"Using project: {project}")
    else:
        project = _find_project_in_cwd()
        _log_step(f"Auto project: {project}")

    try:
        if ns.inspect:
            _log_step("Inspecting project")
            print_project_info(inspect_project(project))
            return 0

        tokens = tuple(ns.flag) if ns.flag else DEFAULT_TOKENS
        if ns.dry_run:
            _log_step("Dry-run mode enabled (no file modifications)")
        _log_step(f"Removing {' '.join(tokens)} from target {ns.target}")
        report = patch_linker_flags(
            project,
            target_name=ns.target,
            tokens=tokens,
            configurations=tuple(ns.configuration),
            dry_run=bool(ns.dry_run),
            verbose=bool(ns.verbose),
        )
    except ProjectLoadError as e:
        raise SystemExit(
            "Error: failed to load Xcode project.\n"
            f"Detail: {e}\n"
            "Hint: pass a valid .xcodeproj directory or project.pbxproj via -p.\n"
        ) from e
    except TargetNotFoundError as e:
        print(f"Could not find target {e.target_name}")
        if e.available:
            print(f"Available targets: {', '.join(e.available)}")
        return 1

    if ns.configuration:
        seen = {c.name for c in report.changes}
        for name in ns.configuration:
            if name not in seen:
                _log_step(f"Warning: build configuration not found on {ns.target}: {name}")

    if report.dry_run:
        print(
            f"Dry-run: would remove {report.removed_total} token(s) "
            f"from {report.target_name} in {report.project_path}"
        )
        return 0

    print(f"Successfully modified {report.project_path} to remove {' '.join(report.tokens)}")
    return 0
