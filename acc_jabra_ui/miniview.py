"""Default-state checks for the ACC Jabra widget (Mini View)."""

from acc_jabra_ui.runner import Case, check_equal, check_present

SUITE_NAME = "Jabra UI Frontend"

MINI_VIEW_CLASS = "mini-view"
MINI_VIEW_FIELDS = ("battery-level", "custom-id", "clock")
FULL_VIEW_ONLY = "full-view-only"


def renders_mini_view_elements(document):
    check_equal("body.className", document.class_name(document.body()), MINI_VIEW_CLASS)
    for element_id in MINI_VIEW_FIELDS:
        check_present(f"#{element_id}", document.get_element_by_id(element_id))


def hides_history_in_mini_view(document):
    full_view_only = document.get_element_by_id(FULL_VIEW_ONLY)
    check_present(f"#{FULL_VIEW_ONLY}", full_view_only)
    check_equal(
        f"#{FULL_VIEW_ONLY} style.display",
        document.style_property(full_view_only, "display"),
        "none",
    )


CASES = (
    Case("renders the Mini View elements by default", renders_mini_view_elements),
    Case("hides the history in the Mini View", hides_history_in_mini_view),
)
