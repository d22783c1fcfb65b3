"""
patcher、inspect 与 CLI 共享的轻量类型定义。
"""

from dataclasses import dataclass, field

DEFAULT_TARGET = "Runner"
DEFAULT_TOKENS = ("-framework", "Pods_Runner")
LDFLAGS_KEY = "OTHER_LDFLAGS"


class ProjectLoadError(RuntimeError):
    """工程描述文件缺失或无法解析。"""


class TargetNotFoundError(RuntimeError):
    """工程中不存在指定名称的 target。"""

    def __init__(self, target_name: str, available: list[str]) -> None:
        self.target_name = target_name
        self.available = available
        super().__init__(f"target not found: {target_name}")


@dataclass(frozen=True)
class ConfigChange:
    """单个 build configuration 的处理结果。"""

    name: str
    # `status` 取值：
    # - `patched`：移除了至少一个 token。
    # - `unchanged`：存在 OTHER_LDFLAGS 但没有可移除的 token。
    # - `missing`：没有 OTHER_LDFLAGS，保持原样。
    # - `not-a-list`：值不是数组（例如单个字符串），不做处理。
    # - `skipped`：被 `--configuration` 过滤掉。
    status: str
    before: list[str] | str | None = None
    after: list[str] | str | None = None
    removed: list[str] = field(default_factory=list)


@dataclass
class PatchReport:
    """一次 patch 的汇总结果。"""

    project_path: str
    target_name: str
    tokens: tuple[str, ...]
    changes: list[ConfigChange] = field(default_factory=list)
    saved: bool = False
    dry_run: bool = False

    @property
    def removed_total(self) -> int:
        return sum(len(c.removed) for c in self.changes)
