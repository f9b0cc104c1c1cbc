from playwright.sync_api import sync_playwright

from acc_jabra_ui.query import ABSENT, DocumentQuery


class PlaywrightDocument(DocumentQuery):
    """A snapshot loaded into its own browser context with scripts disabled."""

    def __init__(self, browser, markup):
        self.context = browser.new_context(java_script_enabled=False)
        try:
            self.page = self.context.new_page()
            self.page.set_content(markup, wait_until="domcontentloaded")
        except Exception:
            self.context.close()
            raise

    def get_element_by_id(self, element_id):
        handle = self.page.evaluate_handle("id => document.getElementById(id)", element_id)
        element = handle.as_element()
        if element is None:
            handle.dispose()
            return ABSENT
        return element

    def body(self):
        element = self.page.query_selector("body")
        return ABSENT if element is None else element

    def class_name(self, element):
        return self._require(element).evaluate("el => el.className")

    def style_property(self, element, name):
        return self._require(element).evaluate(
            "(el, name) => el.style.getPropertyValue(name)", name.strip().lower()
        )

    def close(self):
        self.context.close()


class PlaywrightSession:
    """One headless Chromium per suite run; one context per document."""

    def __init__(self, headless=True):
        self.headless = headless
        self._playwright = None
        self.browser = None

    def __enter__(self):
        self._playwright = sync_playwright().start()
        try:
            self.browser = self._playwright.chromium.launch(headless=self.headless)
        except Exception:
            self._playwright.stop()
            raise
        return self

    def __exit__(self, *exc):
        try:
            self.browser.close()
        finally:
            self._playwright.stop()

    def open(self, markup):
        return PlaywrightDocument(self.browser, markup)
