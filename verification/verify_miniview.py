
from acc_jabra_ui.loader import load_snapshot
from acc_jabra_ui.miniview import CASES, SUITE_NAME
from acc_jabra_ui.runner import print_report, run_suite

def verify_miniview():
    # Static snapshot only: scripts are disabled in the browser context,
    # so this checks the markup as served, before any telemetry arrives.
    snapshot = load_snapshot()

    report = run_suite(SUITE_NAME, CASES, snapshot, backend="playwright")
    print_report(report)

    if not report.ok:
        print("Mini View Verification Failed.")
        exit(1)

    print("Mini View Verification Passed.")

if __name__ == "__main__":
    verify_miniview()
