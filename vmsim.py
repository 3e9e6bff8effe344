import argparse
import sys

from anomaly import find_anomalies, sweep
from exceptions import SimulatorError
from memory_manager import format_snapshot
from policies import Policy
from reference_stream import DEFAULT_PAGE_SIZE, DEFAULT_TRACE_FILE, load_reference_stream
from simulator import DEFAULT_NUM_FRAMES, run_simulation


def show_addresses(stream):
    print(f"Total Addresses Read: {len(stream)}")
    print("Address Stream:")
    for address in stream.addresses:
        print(address)


def report(stats, verbose=False):
    print(f"\n--- {stats.algorithm} Page Replacement ---")
    if verbose:
        for snapshot in stats.snapshots:
            print(format_snapshot(snapshot))
    print(f"{stats.algorithm} Page Faults: {stats.page_faults}")


def print_summary(results):
    print("\n" + "="*70)
    print("SUMMARY OF ALL RESULTS")
    print("="*70)
    print(f"{'Algorithm':<10} {'Frames':<8} {'Page Faults':<13} {'Page Hits':<11} {'Fault Rate':<12} {'Hit Rate':<10}")
    print("-" * 70)
    for stats in results:
        print(f"{str(stats.algorithm):<10} {stats.num_frames:<8} {stats.page_faults:<13} "
              f"{stats.hits:<11} {stats.fault_rate():<12.4f} {stats.hit_rate():<10.4f}")


def print_sweep(curve, algorithm):
    print(f"\n{'='*60}")
    print(f"Frame sweep for {algorithm}")
    print(f"{'='*60}")
    print(f"{'Frames':<8} {'Page Faults':<13}")
    for num_frames, page_faults in curve:
        print(f"{num_frames:<8} {page_faults:<13}")

    anomalies = find_anomalies(curve)
    if anomalies:
        for num_frames in anomalies:
            print(f"Belady's Anomaly: faults rose at {num_frames} frames")
    else:
        print("No anomaly: faults never rose with more frames")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Simulate FIFO, LRU and optimal page replacement over an address trace."
    )
    parser.add_argument("trace", nargs="?", default=DEFAULT_TRACE_FILE,
                        help="file of whitespace-separated non-negative addresses")
    parser.add_argument("--frames", "-f", type=int, default=DEFAULT_NUM_FRAMES)
    parser.add_argument("--page-size", "-s", type=int, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("--policy", "-p", action="append", choices=[p.value for p in Policy],
                        help="policy to run; repeat for several (default: all)")
    parser.add_argument("--sweep", nargs=2, type=int, metavar=("MIN", "MAX"),
                        help="also sweep the frame count from MIN to MAX")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="print the address stream and the frame table after each reference")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    algorithms = [Policy(p) for p in args.policy] if args.policy else list(Policy)

    try:
        stream = load_reference_stream(args.trace, page_size=args.page_size)
        if args.verbose:
            show_addresses(stream)

        results = []
        for algorithm in algorithms:
            stats = run_simulation(stream, algorithm, args.frames, record_trace=args.verbose)
            report(stats, verbose=args.verbose)
            results.append(stats)
        print_summary(results)

        if args.sweep:
            min_frames, max_frames = args.sweep
            for algorithm in algorithms:
                print_sweep(sweep(stream, min_frames, max_frames, algorithm), algorithm)
    except (SimulatorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
