import sys
import os
import time
import argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 jps_lab 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jps_lab.config import JPSConfig
from jps_lab.map import GridMap, MapGenerator
from jps_lab.planning.planners import create_minimize_turns_planner
from jps_lab.planning.heuristics import ManhattanHeuristic
from jps_lab.planning.path_utils import count_turns, path_length, is_path_walkable
from jps_lab.visualization.observers import ExperimentObserver
from experiments.benchmark_config import BenchmarkConfig as cfg


def run_experiment(num_trials: int = cfg.NUM_TRIALS) -> pd.DataFrame:
    variants = cfg.VARIANTS
    results = []

    print(f"{'Density':<8} | {'Algo':<16} | {'Succ%':<6} | {'Time(ms)':<8} | {'Nodes':<8} | {'Len':<8} | {'Turns':<6}")
    print("-" * 80)

    for density in cfg.DENSITIES:
        stats = {name: {'success': 0, 'time': [], 'nodes': [], 'length': [], 'turns': []}
                 for name in variants}

        for i in range(num_trials):
            # A. 生成地图 (同一个 seed 保证所有变体在同一张图上跑)
            seed = cfg.RANDOM_SEED_BASE + i + int(density * 1000)
            grid_map = GridMap(cfg.MAP_WIDTH, cfg.MAP_HEIGHT)
            MapGenerator(obstacle_density=density, max_weight=cfg.MAX_WEIGHT, seed=seed) \
                .generate(grid_map, cfg.START, cfg.GOAL)

            for name, params in variants.items():
                planner = create_minimize_turns_planner(JPSConfig(**params), ManhattanHeuristic())
                observer = ExperimentObserver()

                t0 = time.perf_counter()
                path = planner.plan(cfg.START, cfg.GOAL, grid_map, debugger=observer)
                t1 = time.perf_counter()

                if path and is_path_walkable(path, grid_map):
                    stats[name]['success'] += 1
                    stats[name]['time'].append((t1 - t0) * 1000)
                    stats[name]['nodes'].append(len(observer.expanded_nodes))
                    stats[name]['length'].append(path_length(path))
                    stats[name]['turns'].append(count_turns(path))

        # --- 汇总当前 Density 的数据 ---
        for name in variants:
            s = stats[name]
            succ_rate = (s['success'] / num_trials) * 100
            row = {
                'Density': density,
                'Algorithm': name,
                'SuccessRate': succ_rate,
                'TimeMean': np.mean(s['time']) if s['time'] else 0,
                'NodesMean': np.mean(s['nodes']) if s['nodes'] else 0,
                'LengthMean': np.mean(s['length']) if s['length'] else 0,
                'TurnsMean': np.mean(s['turns']) if s['turns'] else 0,
            }
            print(f"{density:<8.2f} | {name:<16} | {succ_rate:<6.1f} | {row['TimeMean']:<8.2f} | "
                  f"{row['NodesMean']:<8.1f} | {row['LengthMean']:<8.1f} | {row['TurnsMean']:<6.2f}")
            results.append(row)

    return pd.DataFrame(results)


def plot_comparisons(df: pd.DataFrame, save_path: str = None):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))

    metrics = [
        ('TurnsMean', 'Turns', 'Smoothness'),
        ('LengthMean', 'Path Length (cells)', 'Optimality'),
        ('NodesMean', 'Expanded Nodes', 'Search Effort'),
        ('TimeMean', 'Computation Time (ms)', 'Time'),
    ]

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for name in df['Algorithm'].unique():
            data = df[df['Algorithm'] == name]
            ax.plot(data['Density'], data[metric], 'o-', label=name)

        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)
        if i == 0:
            ax.legend()

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Turn-minimizing JPS vs plain orthogonal JPS")
    parser.add_argument("--trials", type=int, default=cfg.NUM_TRIALS)
    parser.add_argument("--save", action="store_true", help="write csv/png into the log dir")
    args = parser.parse_args()

    print("=== 开始 JPS 转弯对比实验 ===")
    df_results = run_experiment(args.trials)

    if args.save:
        os.makedirs(cfg.LOG_DIR, exist_ok=True)
        df_results.to_csv(os.path.join(cfg.LOG_DIR, "compare_turns.csv"), index=False)
        plot_comparisons(df_results, os.path.join(cfg.LOG_DIR, "compare_turns.png"))
    else:
        plot_comparisons(df_results)
