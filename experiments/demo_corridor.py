import sys
import os
import argparse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jps_lab.config import JPSConfig, GlobalConfig
from jps_lab.map import GridMap
from jps_lab.planning.planners import create_minimize_turns_planner
from jps_lab.planning.path_utils import count_turns, expand_path
from jps_lab.visualization.observers import DebugObserver, ExperimentObserver
from jps_lab.visualization.plotter import Visualizer

DEMO_MAP = [
    "....................",
    ".######.......#####.",
    ".#............#.....",
    ".#..#######...#.###.",
    ".#........#.....#...",
    ".####.....#######.#.",
    "......#...........#.",
    ".####.#.#########.#.",
    "......#...........#.",
    "....................",
]


def main():
    parser = argparse.ArgumentParser(description="Single query with debug logging and a plot")
    parser.add_argument("--plain", action="store_true", help="disable turn minimization")
    parser.add_argument("--look-ahead", type=int, default=5)
    parser.add_argument("--penalty", type=float, default=0.5)
    parser.add_argument("--debug", action="store_true", help="write a debug log file")
    parser.add_argument("--out", default=None, help="save the figure instead of showing it")
    args = parser.parse_args()

    grid_map = GridMap.from_strings(DEMO_MAP)
    config = JPSConfig(minimize_turns=not args.plain,
                       look_ahead_distance=args.look_ahead,
                       turn_penalty=args.penalty,
                       track_jump_recursion=True)
    planner = create_minimize_turns_planner(config)

    global_cfg = GlobalConfig(debug_mode=args.debug)
    if global_cfg.debug_mode:
        observer = DebugObserver(log_dir=global_cfg.log_dir)
    else:
        observer = ExperimentObserver()

    start, goal = (0, 0), (19, 9)
    path = planner.plan(start, goal, grid_map, debugger=observer)

    if not path:
        print("规划失败！未找到路径。")
    else:
        print(f"规划成功！跳点 {len(path)} 个, 展开 {len(expand_path(path))} 格, 转弯 {count_turns(path)} 次")
        if global_cfg.debug_mode:
            print(f"Debug log: {observer.log_file}")

    vis = Visualizer(grid_map)
    vis.draw(path, observer, title="JPS" if args.plain else "JPS (minimize turns)")
    if args.out:
        vis.save(args.out)
    else:
        vis.show()


if __name__ == "__main__":
    main()
