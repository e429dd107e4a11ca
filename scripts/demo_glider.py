#!/usr/bin/env python3
"""
Glider Demonstration Script

Drops a glider into a World, advances it and reports its diagonal movement.
Optionally writes the final generation to an ASCII (.gol) or binary (.bgol)
file and the run metrics to a JSON log.
"""

import sys
import json
import logging
from pathlib import Path

from lifegrid import World, Grid, SimulationConfig, LifeGridError
from lifegrid.patterns import glider
from lifegrid.formats import save_ascii, save_binary

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def center_of_mass(grid: Grid):
    """Centroid (x, y) of the alive cells, (0.0, 0.0) if none are alive."""
    coords = grid.alive_coordinates()
    if not coords:
        return (0.0, 0.0)
    return (sum(x for x, _ in coords) / len(coords),
            sum(y for _, y in coords) / len(coords))


def run_glider_demo(grid_size=30, steps=30, start_x=5, start_y=5, toroidal=False, log_interval=None):
    """Run a glider through a world and return movement metrics."""
    logger.info("=== GLIDER DEMONSTRATION ===")
    logger.info(f"Grid size: {grid_size}x{grid_size}, steps: {steps}, toroidal: {toroidal}")

    seed = Grid(grid_size)
    seed.merge(glider(), start_x, start_y)
    world = World(seed, config=SimulationConfig(toroidal=toroidal, log_interval=log_interval))

    initial_com = center_of_mass(world.get_state())
    live_counts = [world.get_alive_cells()]
    live_counts.extend(world.advance(steps))
    final_com = center_of_mass(world.get_state())

    delta_x = final_com[0] - initial_com[0]
    delta_y = final_com[1] - initial_com[1]

    results = {
        "grid_size": grid_size,
        "steps": steps,
        "toroidal": toroidal,
        "initial_position": (start_x, start_y),
        "initial_com": initial_com,
        "final_com": final_com,
        "displacement_x": delta_x,
        "displacement_y": delta_y,
        "live_count_history": live_counts,
        "mass_conserved": all(count == 5 for count in live_counts),
    }

    logger.info(f"Displacement: ({delta_x:.1f}, {delta_y:.1f})")
    logger.info(f"Final live cells: {live_counts[-1]}")
    logger.info(f"Mass conserved: {'YES' if results['mass_conserved'] else 'NO'}")

    return world, results


def save_final_state(world: World, path: str) -> None:
    """Save the final generation, choosing the format from the file extension."""
    state = world.get_state()
    if Path(path).suffix == ".bgol":
        save_binary(path, state)
    else:
        save_ascii(path, state)
    logger.info(f"Final state saved to: {path}")


def save_demo_log(results, log_file="logs/glider_demo.json"):
    """Save demonstration results to a JSON log file."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    with open(log_file, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Demonstration log saved to: {log_file}")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Glider Demonstration")
    parser.add_argument("--grid-size", type=int, default=30, help="Grid size (square)")
    parser.add_argument("--steps", type=int, default=30, help="Generations to advance")
    parser.add_argument("--start-x", type=int, default=5, help="Glider start X position")
    parser.add_argument("--start-y", type=int, default=5, help="Glider start Y position")
    parser.add_argument("--toroidal", action="store_true", help="Wrap the world around its edges")
    parser.add_argument("--log-interval", type=int, default=None, help="Log progress every N generations")
    parser.add_argument("--save", default=None, help="Write final state to a .gol or .bgol file")
    parser.add_argument("--log-file", default=None, help="Write run metrics as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger("lifegrid").setLevel(logging.DEBUG)

    try:
        world, results = run_glider_demo(
            grid_size=args.grid_size,
            steps=args.steps,
            start_x=args.start_x,
            start_y=args.start_y,
            toroidal=args.toroidal,
            log_interval=args.log_interval
        )

        print(world)

        if args.save:
            save_final_state(world, args.save)

        if args.log_file:
            save_demo_log(results, args.log_file)

    except (LifeGridError, OSError) as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
