"""
Command-line entry point.

Usage:
    python -m examslots --registrations student_courses.txt [options]
"""
import argparse
import logging
import random

import networkx as nx

from .config import ALGORITHMS, DEFAULT_ALGO, DEFAULT_TRIALS
from .graph import ConflictGraph
from .graph_build import build_conflict_graph_from_students, build_conflict_graph_from_edges
from .io_utils import load_registrations, load_edge_list_csv, save_schedule_csv
from .scheduler import Scheduler, group_slots, label_slots
from .scheduling.evaluation import summary
from .trials import run_trials


def synthetic_graph(n: int, density: float, seed=None) -> ConflictGraph:
    G = nx.gnp_random_graph(n, density, seed=seed)
    G = nx.relabel_nodes(G, lambda x: f"E{x}")
    graph = ConflictGraph()
    for u in G.nodes():
        graph.add_vertex(u)
    for u, v in G.edges():
        graph.add_edge(u, v)
    return graph


def load_graph(args) -> ConflictGraph:
    if args.registrations:
        return build_conflict_graph_from_students(load_registrations(args.registrations))
    if args.edges:
        return build_conflict_graph_from_edges(load_edge_list_csv(args.edges))
    if args.sample:
        return Scheduler.sample().graph
    if args.generate is not None:
        return synthetic_graph(args.generate, args.density, seed=args.seed)
    raise SystemExit("Provide --registrations, --edges, --sample, or --generate N")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="ExamSlots – conflict-free exam slot assignment")
    # Input modes
    p.add_argument('--registrations', type=str, help='Registration file, one STUDENT|C1,C2,... per line')
    p.add_argument('--edges', type=str, help='Edge list CSV u,v')
    p.add_argument('--sample', action='store_true', help='Use the built-in five-course sample')
    p.add_argument('--generate', type=int, default=None, help='Generate synthetic graph with N courses')
    p.add_argument('--density', type=float, default=0.15)

    # Algo
    p.add_argument('--algo', type=str, default=DEFAULT_ALGO, choices=ALGORITHMS)
    p.add_argument('--random_first', action='store_true',
                   help='Pick the first course at random (propagate only; also applies to every trial)')
    p.add_argument('--trials', type=int, default=1,
                   help=f'Repeat and keep the fewest slots (try {DEFAULT_TRIALS} with --random_first)')
    p.add_argument('--seed', type=int, default=None)

    # Output
    p.add_argument('--out_schedule', type=str, default=None, help='Write course_id,slot CSV here')
    p.add_argument('--show_graph', action='store_true', help='Print each course with its conflicts')
    p.add_argument('--show_schedule', action='store_true')
    p.add_argument('-v', '--verbose', action='store_true')
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be at least 1")
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        G = load_graph(args)
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"Could not read input: {e}")
    if args.show_graph:
        print(G.describe())

    if args.trials > 1:
        if args.algo == 'propagate' and not args.random_first:
            print("Note: without --random_first every propagate trial is identical")
        report = run_trials(G, args.trials, seed=args.seed, algo=args.algo,
                            random_first=args.random_first)
        print(f"Trials: {args.trials}  Fewest slots: {report.best_slots} (trial {report.best_trial})  "
              f"Most slots: {max(report.slot_counts)}")
        if not report.all_valid:
            print("Warning: some trials produced invalid colorings")
        colors = report.best_colors
    else:
        sched = Scheduler(G, algo=args.algo, rng=random.Random(args.seed),
                          random_first=args.random_first)
        colors = sched.color_graph()

    print(f"Number of time slots needed: {len(set(colors.values()))}")
    print(summary(G, colors))
    if args.show_schedule:
        print("Exam Schedule:")
        for slot, courses in label_slots(group_slots(colors)).items():
            print(f"{slot}: {', '.join(str(c) for c in courses)}")

    if args.out_schedule:
        save_schedule_csv(args.out_schedule, colors)
        print(f"Saved: {args.out_schedule}")


if __name__ == '__main__':
    main()
