"""
Run every preset headless and store the trajectories in HDF5
"""
import sys
import argparse
from pathlib import Path

from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent / "src"))

from lifesim.config import PRESETS
from lifesim.evaluation.metrics import summarize_run
from lifesim.utils.storage import save_preset_runs


def run_presets(num_steps):
    """
    Simulate each preset under its own boundary policy.

    Args:
        num_steps: Generations per run

    Returns:
        Dictionary of {preset: {'trajectory': array, 'boundary': str}}
    """
    runs = {}
    for name in tqdm(PRESETS, desc="Presets"):
        config = PRESETS[name]
        grid = config.build_grid()
        runs[name] = {
            'trajectory': grid.simulate(num_steps),
            'boundary': config.boundary,
        }
    return runs


def main():
    parser = argparse.ArgumentParser(description='Export preset trajectories to HDF5')
    parser.add_argument('--steps', type=int, default=200,
                        help='Generations per preset')
    parser.add_argument('--output', type=str, default='data/presets.h5',
                        help='Output HDF5 file')
    args = parser.parse_args()

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("Preset Trajectory Export")
    print("=" * 60)

    runs = run_presets(args.steps)

    for name, data in runs.items():
        summary = summarize_run(data['trajectory'])
        print(f"  {name:8s} {data['boundary']:9s} "
              f"pop {summary['initial_population']:4d} -> {summary['final_population']:4d}  "
              f"{summary['outcome']}")

    save_preset_runs(output_path, runs)


if __name__ == "__main__":
    main()
