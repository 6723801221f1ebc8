# 绘图逻辑 (Matplotlib)

from typing import Optional, Sequence

import matplotlib.pyplot as plt

from jps_lab.types import Cell
from jps_lab.map.grid_map import GridMap
from jps_lab.planning.path_utils import expand_path
from jps_lab.visualization.observers import ExperimentObserver


class Visualizer:
    """
    栅格 + 搜索过程 + 路径
    图像坐标: x 向右为列，y 向下为行 (origin='upper')，与 GridMap.data[y, x] 一致。
    """
    def __init__(self, map_obj: GridMap, figsize=(8, 8)):
        self.map = map_obj
        self.fig, self.ax = plt.subplots(figsize=figsize)

    def draw(self,
             path: Optional[Sequence[Cell]] = None,
             observer: Optional[ExperimentObserver] = None,
             title: str = "Turn-minimizing JPS"):
        ax = self.ax

        # 1. 静态底图 (权重作为浅色热力图叠加)
        ax.imshow(self.map.data, cmap='Greys', origin='upper', vmin=0, vmax=1)
        if self.map.weights.max() > 1.0:
            ax.imshow(self.map.weights, cmap='YlOrBr', origin='upper', alpha=0.3)

        # 2. 搜索过程
        if observer is not None:
            if observer.tested_cells:
                tx = [c[0] for c in observer.tested_cells]
                ty = [c[1] for c in observer.tested_cells]
                ax.scatter(tx, ty, c='orange', s=4, alpha=0.4, label='Tested')
            if observer.expanded_nodes:
                ex = [n[0] for n in observer.expanded_nodes]
                ey = [n[1] for n in observer.expanded_nodes]
                ax.scatter(ex, ey, c='red', s=12, alpha=0.6, label='Expanded')

        # 3. 路径：逐格展开的细线 + 跳点
        if path:
            cells = expand_path(path)
            ax.plot([c[0] for c in cells], [c[1] for c in cells], 'b-', linewidth=2, label='Path')
            ax.scatter([p[0] for p in path], [p[1] for p in path], c='blue', s=25, zorder=5,
                       label='Jump points')
            ax.plot(path[0][0], path[0][1], 'go', markersize=10, label='Start')
            ax.plot(path[-1][0], path[-1][1], 'rx', markersize=10, label='Goal')

        ax.set_title(title)
        ax.set_xlim(-0.5, self.map.width - 0.5)
        ax.set_ylim(self.map.height - 0.5, -0.5)
        ax.set_aspect('equal')
        if ax.get_legend_handles_labels()[0]:
            ax.legend(loc='upper right', fontsize='small')
        return self.fig

    def save(self, file_path: str):
        self.fig.tight_layout()
        self.fig.savefig(file_path)
        plt.close(self.fig)

    def show(self):
        plt.show()
