"""
链接参数（`OTHER_LDFLAGS`）数组的按 token 编辑。
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def remove_flag_tokens(flags: Any, tokens: Iterable[str]) -> list[str] | None:
    """
    从 flags 数组中原地删除所有与 `tokens` 完全相等的元素。

    - 按 token 比较，不做子串匹配；其余元素保持原有顺序。
    - `flags` 不是数组（例如单个字符串）时不做任何修改并返回 `None`。
    - 返回按出现顺序被删除的 token 列表。
    """
    if not isinstance(flags, list):
        return None
    drop = set(tokens)
    removed = [x for x in flags if x in drop]
    if removed:
        flags[:] = [x for x in flags if x not in drop]
    return removed
