"""Directory-history picker modal.

Opening starts a background history query. The worker may close the modal
on its own when there is nothing to show; otherwise its result is queued and
installed by the UI thread in :meth:`HistoryModal.drain_results`, so list
state is only ever touched from the UI thread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from ..input.keys import action_for_key, hint_for_mode
from ..list_model.actions import Action, ActionResult
from ..list_model.session import SearchSession
from ..list_model.types import Entry, Frame
from ..render.frame import CHROME_ROWS
from ..search.fuzzy import FuzzyScorer, default_scorer
from ..sources.history import HistorySource
from .open_flag import OpenFlag

logger = logging.getLogger(__name__)

HISTORY_TITLE = "Directory History"
HISTORY_PLACEHOLDER = "Search directory history..."
DEFAULT_MODAL_WIDTH = 60
DEFAULT_MODAL_HEIGHT = 20
MIN_MODAL_WIDTH, MAX_MODAL_WIDTH = 40, 100
MIN_MODAL_HEIGHT, MAX_MODAL_HEIGHT = 10, 30


@dataclass(frozen=True)
class HistoryFetchResult:
    request_id: int
    paths: tuple[str, ...]


def modal_size_for_terminal(width: int, height: int) -> tuple[int, int]:
    """Two thirds of the terminal, clamped to the modal's min/max box."""
    modal_width = min(max(width * 2 // 3, MIN_MODAL_WIDTH), MAX_MODAL_WIDTH)
    modal_height = min(max(height * 2 // 3, MIN_MODAL_HEIGHT), MAX_MODAL_HEIGHT)
    return modal_width, modal_height


class HistoryModal:
    """Modal list of previously visited directories with search."""

    def __init__(self, source: HistorySource | None = None, scorer: FuzzyScorer | None = None) -> None:
        self.source = source if source is not None else HistorySource()
        self.scorer = scorer if scorer is not None else default_scorer()
        self.width = DEFAULT_MODAL_WIDTH
        self.height = DEFAULT_MODAL_HEIGHT
        self.base_path: str | None = None
        self.session: SearchSession | None = None
        self._flag = OpenFlag()
        self._lock = threading.Lock()
        self._request_id = 0
        self._results: Queue[HistoryFetchResult] = Queue()

    @property
    def viewport_height(self) -> int:
        return max(1, self.height - CHROME_ROWS)

    def is_open(self) -> bool:
        return self._flag.is_set()

    @property
    def loading(self) -> bool:
        return self.is_open() and self.session is None

    def _current_request_id(self) -> int:
        with self._lock:
            return self._request_id

    def _fetch(self, request_id: int, exclude_path: str) -> None:
        try:
            paths = self.source.directories(exclude_path)
        except Exception:
            logger.warning("history fetch failed", exc_info=True)
            paths = []
        # Id check and auto-close are atomic with respect to open/close.
        with self._lock:
            if request_id != self._request_id:
                return
            if not paths:
                logger.info("no directory history outside %s; closing", exclude_path)
                self._flag.close()
                return
            self._results.put(HistoryFetchResult(request_id=request_id, paths=tuple(paths)))

    def open(self, exclude_path: Path | str, background: bool = True) -> bool:
        """Open the modal and start fetching history; returns ``False`` if already open."""
        with self._lock:
            if not self._flag.try_open():
                return False
            self._request_id += 1
            request_id = self._request_id
        self.base_path = str(exclude_path)
        self.session = None
        if not background:
            self._fetch(request_id, self.base_path)
            self.drain_results()
            return self.is_open()
        worker = threading.Thread(
            target=self._fetch,
            args=(request_id, self.base_path),
            name="lazydirs-history-fetch",
            daemon=True,
        )
        worker.start()
        return True

    def drain_results(self) -> bool:
        """Install the newest completed fetch; returns whether the list changed."""
        latest: HistoryFetchResult | None = None
        while True:
            try:
                latest = self._results.get_nowait()
            except Empty:
                break
        if latest is None or latest.request_id != self._current_request_id() or not self.is_open():
            return False
        dataset = tuple(Entry(key=path, display_name=path) for path in latest.paths)
        self.session = SearchSession(
            dataset,
            self.scorer,
            viewport_height=self.viewport_height,
            title=HISTORY_TITLE,
            placeholder=HISTORY_PLACEHOLDER,
        )
        return True

    def close(self) -> None:
        with self._lock:
            self._request_id += 1
            self._flag.close()
        self.session = None

    def update_size(self, terminal_width: int, terminal_height: int) -> None:
        self.width, self.height = modal_size_for_terminal(terminal_width, terminal_height)
        if self.session is not None:
            self.session.resize(self.viewport_height)

    def dispatch(self, action: Action, char: str = "") -> ActionResult:
        if not self.is_open():
            return ActionResult(handled=False)
        if self.session is None:
            if action is Action.CLOSE:
                self.close()
                return ActionResult(changed=True, close=True)
            return ActionResult()
        result = self.session.dispatch(action, char)
        if result.close:
            self.close()
        return result

    def handle_key(self, key: str) -> ActionResult:
        if not self.is_open():
            return ActionResult(handled=False)
        searching = self.session.searching if self.session is not None else False
        mapped = action_for_key(key, searching)
        if mapped is None:
            return ActionResult()
        action, char = mapped
        return self.dispatch(action, char)

    def frame(self) -> Frame | None:
        if self.session is None:
            return None
        return self.session.frame(hint=hint_for_mode(self.session.searching))
