from dataclasses import dataclass, field
from enum import Enum

from acc_jabra_ui.query import ABSENT, ElementAbsent, document_factory


class CheckFailed(AssertionError):
    def __init__(self, label, expected, observed):
        super().__init__(f"{label}: expected {expected!r}, got {observed!r}")
        self.label = label
        self.expected = expected
        self.observed = observed


class CaseState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class Case:
    name: str
    func: object


@dataclass
class CaseResult:
    name: str
    state: CaseState = CaseState.PENDING
    message: str = ""

    @property
    def passed(self):
        return self.state is CaseState.PASSED


@dataclass
class SuiteReport:
    name: str
    results: list = field(default_factory=list)

    @property
    def ok(self):
        return all(result.passed for result in self.results)

    @property
    def exit_code(self):
        return 0 if self.ok else 1

    def outcomes(self):
        return [(result.name, result.state) for result in self.results]


def check_equal(label, observed, expected):
    if observed != expected:
        raise CheckFailed(label, expected, observed)


def check_present(label, element):
    if element is ABSENT or element is None:
        raise CheckFailed(label, "present", ABSENT)


def run_case(case, snapshot, open_document):
    result = CaseResult(case.name)
    result.state = CaseState.RUNNING
    with open_document(snapshot.markup) as document:
        try:
            case.func(document)
        except AssertionError as exc:
            # CheckFailed, or a bare assert written inside the case
            result.state = CaseState.FAILED
            result.message = str(exc) or "assertion failed"
            return result
        except ElementAbsent as exc:
            result.state = CaseState.FAILED
            result.message = f"{exc}: expected an element, got ABSENT"
            return result
    result.state = CaseState.PASSED
    return result


def run_suite(name, cases, snapshot, backend="soup"):
    """Run every case against its own parse of `snapshot`.

    A failing case does not stop the ones after it.
    """
    report = SuiteReport(name)
    with document_factory(backend) as open_document:
        for case in cases:
            report.results.append(run_case(case, snapshot, open_document))
    return report


def print_report(report):
    print(report.name)
    for result in report.results:
        if result.passed:
            print(f"SUCCESS: {result.name}")
        else:
            print(f"FAILURE: {result.name}")
            print(f"    {result.message}")
    passed = sum(1 for result in report.results if result.passed)
    print(f"{passed}/{len(report.results)} cases passed.")
