#!/usr/bin/env python3
"""
Smart traffic signal simulation for a single 4-lane intersection.
Usage:
  python -m atcs.simulate --lanes 2 0 5 1 --cycles 3 --seed 42 --stats traffic_stats.txt
  python -m atcs.simulate            # prompts for lane counts and cycle count
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from config.settings import config
from utils.exceptions import StatisticsLogError, ValidationError
from utils.logger import get_logger
from utils.validators import validate_cycle_count, validate_lane_count, validate_lane_counts

from .arrivals import ArrivalInjector
from .intersection import LANES, Intersection, create_intersection, run_one_cycle, seed_lanes
from .statistics import format_state, save_statistics, summarize

logger = get_logger("simulation")

def _prompt(input_fn: Callable[[str], str], message: str) -> str:
    try:
        return input_fn(message)
    except EOFError:
        return ""

def prompt_lane_counts(input_fn: Callable[[str], str] = input,
                       emit: Callable[[str], None] = print) -> List[int]:
    """Ask the operator for each lane's initial vehicle count."""
    emit(f"Enter initial vehicle count for each of the {LANES} lanes:")
    return [validate_lane_count(_prompt(input_fn, f" Lane {i + 1}: ")) for i in range(LANES)]

def prompt_cycle_count(input_fn: Callable[[str], str] = input) -> int:
    raw = _prompt(input_fn, "Enter the number of cycles to simulate (1 cycle = one green for each lane): ")
    return validate_cycle_count(raw)

def run_simulation(it: Intersection, cycles: int, injector: ArrivalInjector,
                   emit: Optional[Callable[[str], None]] = print) -> List[Dict[str, Any]]:
    """
    Run `cycles` cycles with random arrivals after each one.
    Prints the state before and after every cycle when `emit` is given and
    returns per-cycle records (state before/after plus the arrivals drawn).
    """
    history = []
    for c in range(cycles):
        before = it.snapshot()
        if emit:
            emit(f"\n--- Starting cycle {c + 1} ---")
            emit(format_state(it))

        run_one_cycle(it)
        arrivals = injector.inject(it)

        if emit:
            emit(format_state(it))
        history.append({
            "cycle": c + 1,
            "before": before,
            "arrivals": arrivals,
            "after": it.snapshot()
        })
        logger.debug(f"Cycle {c + 1} finished: waiting={it.waiting_counts()}")
    return history

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Smart Traffic Signal Simulation (4 lanes)")
    p.add_argument("--lanes", nargs=LANES, metavar="N",
                   help="initial vehicle count for each lane (prompted if omitted)")
    p.add_argument("--cycles", help="number of cycles to simulate (prompted if omitted)")
    p.add_argument("--seed", default=None, help="seed for random arrivals (default: clock)")
    p.add_argument("--name", default=config.intersection_name, help="intersection name")
    p.add_argument("--stats", default=str(config.stats_file), help="statistics log to append to")
    return p

def main(argv: Optional[List[str]] = None,
         input_fn: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    try:
        injector = ArrivalInjector(seed=args.seed if args.seed is not None else config.seed)
        it = create_intersection(args.name)
    except ValidationError as e:
        logger.error(f"Invalid setup: {e}")
        print(f"Invalid input: {e}. Exiting.", file=sys.stderr)
        return 1

    print(f"Smart Traffic Signal Simulation ({LANES} lanes)")
    try:
        if args.lanes is not None:
            counts = validate_lane_counts(args.lanes, LANES)
        else:
            counts = prompt_lane_counts(input_fn)
        seed_lanes(it, counts)
    except ValidationError as e:
        logger.error(f"Invalid lane counts: {e}")
        print("Invalid input. Exiting.", file=sys.stderr)
        return 1

    try:
        if args.cycles is not None:
            cycles_to_run = validate_cycle_count(args.cycles)
        else:
            cycles_to_run = prompt_cycle_count(input_fn)
    except ValidationError as e:
        logger.error(f"Invalid cycle count: {e}")
        print("Invalid number of cycles. Exiting.", file=sys.stderr)
        return 1

    logger.info(f"Simulating {cycles_to_run} cycles at '{it.name}' from {counts} (seed={injector.seed})")
    run_simulation(it, cycles_to_run, injector)

    print("\nSimulation finished. Final state:")
    print(format_state(it))

    summary = summarize(it)
    logger.info(
        f"Run complete: cycles={summary.cycles}, served={summary.total_served}, "
        f"wait={summary.total_wait_secs}, avg={summary.avg_wait_per_vehicle:.2f}"
    )

    try:
        path = save_statistics(it, args.stats)
        print(f"Statistics saved to {path}")
    except StatisticsLogError as e:
        # non-fatal: the run itself completed
        logger.warning(f"Statistics not saved: {e}")
        print(f"Warning: {e}", file=sys.stderr)

    return 0

if __name__ == "__main__":
    sys.exit(main())
