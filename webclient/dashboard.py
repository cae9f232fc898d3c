import logging
import threading

from . import rendering
from .api import ApiError
from .debounce import Debouncer
from .notifications import Notifier

logger = logging.getLogger(__name__)

PAGE_SIZE = 9
SEARCH_DEBOUNCE_SECONDS = 0.5
VIEW_MODES = ("grid", "table")


class Dashboard:
    """
    State and actions of the admin enquiry dashboard.

    Search changes are debounced and always go back to page 1. Page changes
    outside ``[1, total_pages]`` are ignored.
    """

    def __init__(self, api, notifier=None, debounce=SEARCH_DEBOUNCE_SECONDS):
        self.api = api
        self.notifier = notifier if notifier is not None else Notifier()
        self.enquiries = []
        self.loading = True
        self.refreshing = False
        self.search_term = ""
        self.current_page = 1
        self.total_pages = 1
        self.total_enquiries = 0
        self.selected = None
        self.view_mode = "grid"
        self._search = Debouncer(debounce, self._search_settled)
        self._lock = threading.Lock()
        self._latest_request = 0

    def fetch(self, page=1, search=""):
        """
        Load one page. Searches settle on the debounce thread, so each request
        is numbered and a response is applied only if no later request started.
        """
        with self._lock:
            self._latest_request += 1
            request_id = self._latest_request
            self.loading = True
        try:
            data = self.api.list_enquiries(page=page, limit=PAGE_SIZE, search=search)
        except ApiError as e:
            logger.error(f"Failed to fetch enquiries: {e.message}")
            with self._lock:
                current = request_id == self._latest_request
            if current:
                self.notifier.error("Failed to fetch enquiries")
            data = None

        with self._lock:
            if request_id != self._latest_request:
                logger.debug(f"Dropping stale response for page {page}")
                return False
            if data is not None:
                self.enquiries = data["enquiries"]
                self.total_pages = data["totalPages"]
                self.current_page = data["currentPage"]
                self.total_enquiries = data["totalEnquiries"]
            self.loading = False
            self.refreshing = False
        return data is not None

    def load(self):
        self.fetch(1, self.search_term)

    # search

    def set_search(self, text):
        self.search_term = text
        self._search(text)

    def _search_settled(self, text):
        self.fetch(1, text)

    def clear_search(self):
        self.set_search("")

    def flush_search(self):
        self._search.flush()

    @property
    def search_pending(self):
        return self._search.pending

    def close(self):
        self._search.cancel()

    # paging

    def go_to_page(self, page):
        if 1 <= page <= self.total_pages:
            self.fetch(page, self.search_term)
            return True
        return False

    def next_page(self):
        return self.go_to_page(self.current_page + 1)

    def previous_page(self):
        return self.go_to_page(self.current_page - 1)

    def refresh(self):
        self.refreshing = True
        self.fetch(self.current_page, self.search_term)

    # actions

    def delete(self, enquiry_id, confirm):
        """Delete after ``confirm()`` returns true, then reload the current page."""
        if not confirm():
            return False
        try:
            self.api.delete_enquiry(enquiry_id)
        except ApiError:
            self.notifier.error("Failed to delete enquiry")
            return False

        self.notifier.success("Enquiry deleted")
        if self.selected is not None and self.selected.get("id") == enquiry_id:
            self.selected = None
        self.fetch(self.current_page, self.search_term)
        return True

    def view(self, enquiry):
        self.selected = enquiry

    def close_detail(self):
        self.selected = None

    @property
    def detail_open(self):
        return self.selected is not None

    # presentation

    def set_view_mode(self, mode):
        if mode not in VIEW_MODES:
            raise ValueError(f"Unknown view mode: {mode}")
        self.view_mode = mode

    def render(self):
        if self.view_mode == "table":
            return rendering.render_table(self.enquiries)
        return rendering.render_grid(self.enquiries)

    def render_detail(self):
        if self.selected is None:
            return ""
        return rendering.render_detail(self.selected)
