import argparse
import sys

import matplotlib.pyplot as plt

from anomaly import compare_policies, find_anomalies
from exceptions import SimulatorError
from reference_stream import DEFAULT_PAGE_SIZE, DEFAULT_TRACE_FILE, load_reference_stream


def plot_fault_curves(curves, output_path='fault_curves.png', title=None, show=False):
    fig, ax = plt.subplots(figsize=(10, 6))
    fig.suptitle(title or 'Page Faults vs. Number of Frames', fontsize=14, fontweight='bold')

    for algorithm, curve in curves.items():
        frames = [num_frames for num_frames, _ in curve]
        faults = [page_faults for _, page_faults in curve]
        ax.plot(frames, faults, marker='o', label=str(algorithm))

        # Highlight every point where adding a frame added faults
        fault_at = dict(curve)
        for num_frames in find_anomalies(curve):
            ax.scatter([num_frames], [fault_at[num_frames]], s=150, facecolors='none',
                       edgecolors='red', linewidths=2, zorder=3)
            ax.annotate('anomaly', (num_frames, fault_at[num_frames]),
                        textcoords='offset points', xytext=(0, 10), ha='center', fontsize=9, color='red')

    ax.set_xlabel('Frames')
    ax.set_ylabel('Page Faults')
    ax.grid(alpha=0.3)
    ax.legend(loc='upper right', frameon=True)

    plt.tight_layout()
    plt.savefig(output_path, dpi=300, bbox_inches='tight')
    print(f"\nGraph saved as '{output_path}'")
    if show:
        plt.show()
    plt.close(fig)
    return output_path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot page faults of every policy across a range of frame counts.")
    parser.add_argument("trace", nargs="?", default=DEFAULT_TRACE_FILE)
    parser.add_argument("--page-size", "-s", type=int, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("--min-frames", type=int, default=1)
    parser.add_argument("--max-frames", type=int, default=10)
    parser.add_argument("--output", "-o", default='fault_curves.png')
    parser.add_argument("--show", action="store_true")
    args = parser.parse_args(argv)

    print("Running simulations...")
    try:
        stream = load_reference_stream(args.trace, page_size=args.page_size)
        curves = compare_policies(stream, args.min_frames, args.max_frames)
    except (SimulatorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    plot_fault_curves(curves, args.output, title=f'Page Faults vs. Number of Frames ({args.trace})',
                      show=args.show)
    return 0


if __name__ == '__main__':
    sys.exit(main())
