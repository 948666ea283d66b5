"""
Generate figures and animations for every preset and every pattern
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from lifesim.config import PRESETS
from lifesim.core.grid import LifeGrid
from lifesim.utils.patterns import PATTERN_CATEGORIES, pattern_size
from lifesim.utils.visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation,
    visualize_pattern_grid,
    compare_boundaries
)


def main():
    """Render one sample per preset plus a pattern overview."""

    project_root = Path(__file__).parent.parent
    output_dir = project_root / "figures" / "samples"
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Generating samples for each preset...")
    print("=" * 60)

    for name, config in PRESETS.items():
        print(f"  Processing {name}...")

        num_steps = 150 if name == 'gun' else 50
        large = config.cols >= 80

        grid = config.build_grid()
        initial_state = grid.snapshot()
        trajectory = grid.simulate(num_steps)

        visualize_state(
            initial_state,
            title=f"{name.upper()} (gen 0)",
            save_path=output_dir / f"{name}_initial.png",
            figsize=(10, 10) if large else (8, 8)
        )
        visualize_trajectory(
            trajectory,
            pattern_name=name.upper(),
            save_path=output_dir / f"{name}_trajectory.png",
            figsize=(18, 5) if large else (16, 4)
        )
        create_animation(
            trajectory,
            pattern_name=name.upper(),
            save_path=output_dir / f"{name}_animation.gif",
            fps=10,
            figsize=(10, 8) if large else (8, 8)
        )

        # Same start, other boundary
        other = 'toroidal' if config.boundary == 'clamped' else 'clamped'
        other_trajectory = config.with_overrides(boundary=other).build_grid().simulate(num_steps)
        clamped, toroidal = ((trajectory, other_trajectory) if config.boundary == 'clamped'
                             else (other_trajectory, trajectory))
        compare_boundaries(
            clamped[-1], toroidal[-1], num_steps,
            save_path=output_dir / f"{name}_boundaries.png"
        )

    print("\n" + "=" * 60)
    print("Creating pattern overview grid...")
    all_patterns = {}
    for patterns in PATTERN_CATEGORIES.values():
        for pattern_name, offsets in patterns.items():
            h, w = pattern_size(offsets)
            grid = LifeGrid(h + 2, w + 2, 'clamped')
            grid.load_pattern(offsets, 1, 1)
            all_patterns[pattern_name] = grid.snapshot()

    visualize_pattern_grid(
        all_patterns,
        save_path=output_dir / "all_patterns_overview.png",
        figsize=(18, 12)
    )

    print("\n" + "=" * 60)
    print(f"All samples saved to: {output_dir.absolute()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
