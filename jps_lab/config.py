# [关键] 全局配置定义

# jps_lab/config.py
import numbers
from dataclasses import dataclass


@dataclass
class GlobalConfig:
    debug_mode: bool = False
    log_dir: str = "logs/planning_debug"


@dataclass
class JPSConfig:
    """
    转弯最少化 JPS 的参数
    构造时即校验，非法参数直接抛异常 (fail fast)，不会在搜索中途才暴露。
    """
    minimize_turns: bool = True
    look_ahead_distance: int = 3     # 前瞻平滑的最大距离 (格)
    turn_penalty: float = 0.5        # 每次转弯附加到 g 上的代价
    track_jump_recursion: bool = False  # 调试用：记录 jump 扫描过的格子
    check_connectivity: bool = False    # 搜索前用连通域标记快速排除不可达的目标

    def __post_init__(self):
        if isinstance(self.look_ahead_distance, bool) or \
                not isinstance(self.look_ahead_distance, numbers.Integral):
            raise ValueError(f"look_ahead_distance must be an integer, got {self.look_ahead_distance!r}")
        if self.look_ahead_distance < 1:
            raise ValueError(f"look_ahead_distance must be >= 1, got {self.look_ahead_distance}")
        if not isinstance(self.turn_penalty, numbers.Real) or self.turn_penalty < 0:
            raise ValueError(f"turn_penalty must be a number >= 0, got {self.turn_penalty!r}")

    @property
    def minimize_turns_active(self) -> bool:
        """
        look_ahead_distance == 1 时前瞻只能看到相邻格，转弯最少化退化为普通正交 JPS。
        """
        return self.minimize_turns and self.look_ahead_distance > 1
