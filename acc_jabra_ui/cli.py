import argparse
import sys

from acc_jabra_ui.loader import SNAPSHOT_ENV, SnapshotLoadError, default_snapshot_path, load_snapshot
from acc_jabra_ui.miniview import CASES, SUITE_NAME
from acc_jabra_ui.query import BACKENDS
from acc_jabra_ui.runner import print_report, run_suite

LOAD_FAILURE_EXIT = 2


def build_parser():
    parser = argparse.ArgumentParser(
        prog="acc-jabra-ui",
        description="Check the default (Mini View) state of the ACC Jabra widget snapshot.",
    )
    parser.add_argument(
        "--snapshot",
        default=None,
        help=f"HTML snapshot to check (default: ${SNAPSHOT_ENV} or {default_snapshot_path()})",
    )
    parser.add_argument("--backend", choices=BACKENDS, default="soup")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        snapshot = load_snapshot(args.snapshot)
    except SnapshotLoadError as exc:
        print(f"Error reading {exc.path}: {exc.reason}")
        return LOAD_FAILURE_EXIT

    report = run_suite(SUITE_NAME, CASES, snapshot, backend=args.backend)
    print_report(report)
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
