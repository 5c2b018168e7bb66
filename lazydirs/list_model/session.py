"""Search-mode protocol layered on :class:`NavigableList`.

The session keeps the dataset it was opened with untouched and only ever
replaces the displayed sequence. Typing filters live; commit keeps the
filtered view, cancel restores the original dataset object.
"""

from __future__ import annotations

from ..search.fuzzy import FuzzyScorer
from .actions import UNHANDLED, Action, ActionResult
from .grouped import filter_preserving_groups
from .navigable import NavigableList
from .types import Dataset, Entry, Frame, ListState, SearchMode, SearchState


class SearchSession:
    """One feature-owned list with browse/search modes."""

    def __init__(
        self,
        all_entries: Dataset,
        scorer: FuzzyScorer,
        viewport_height: int = 10,
        title: str = "",
        placeholder: str = "",
    ) -> None:
        self.scorer = scorer
        self.title = title
        self.placeholder = placeholder
        self.search = SearchState()
        self.finished = False
        self.list = NavigableList(
            ListState(
                all_entries=all_entries,
                displayed=all_entries,
                viewport_height=viewport_height,
            )
        )

    @property
    def state(self) -> ListState:
        return self.list.state

    @property
    def all_entries(self) -> Dataset:
        return self.list.state.all_entries

    @property
    def displayed(self) -> Dataset:
        return self.list.state.displayed

    @property
    def mode(self) -> SearchMode:
        return self.search.mode

    @property
    def query_text(self) -> str:
        return self.search.query_text

    @property
    def searching(self) -> bool:
        return self.search.mode is SearchMode.SEARCHING

    def _refilter(self) -> None:
        self.list.replace(filter_preserving_groups(self.all_entries, self.search.query_text, self.scorer))

    def begin_search(self) -> bool:
        if self.searching:
            return False
        self.search.mode = SearchMode.SEARCHING
        self.search.query_text = ""
        return True

    def type_char(self, char: str) -> bool:
        if not self.searching or not char:
            return False
        self.search.query_text += char
        self._refilter()
        return True

    def delete_char(self) -> bool:
        if not self.searching or not self.search.query_text:
            return False
        self.search.query_text = self.search.query_text[:-1]
        self._refilter()
        return True

    def clear_query(self) -> bool:
        if not self.searching or not self.search.query_text:
            return False
        self.search.query_text = ""
        self._refilter()
        return True

    def commit_search(self) -> bool:
        if not self.searching:
            return False
        self.search.mode = SearchMode.BROWSE
        if not self.search.query_text:
            self.list.replace(self.all_entries)
        return True

    def cancel_search(self) -> bool:
        if not self.searching:
            return False
        self.search.mode = SearchMode.BROWSE
        self.search.query_text = ""
        self.list.replace(self.all_entries)
        return True

    def confirm(self) -> Entry | None:
        """Return the entry under the cursor and finish, or ``None`` as a no-op."""
        if self.searching or self.finished:
            return None
        entry = self.list.selected()
        if entry is None:
            return None
        self.finished = True
        return entry

    def resize(self, viewport_height: int) -> None:
        self.list.resize(viewport_height)

    def dispatch(self, action: Action, char: str = "") -> ActionResult:
        """Apply one logical action; search-only actions are ignored while browsing."""
        if action is Action.CLOSE:
            if self.searching:
                return UNHANDLED
            return ActionResult(close=True)
        if action is Action.CONFIRM:
            entry = self.confirm()
            if entry is None:
                return ActionResult()
            return ActionResult(changed=True, selected=entry, close=True)
        if action is Action.MOVE_UP:
            return ActionResult(changed=self.list.move_up())
        if action is Action.MOVE_DOWN:
            return ActionResult(changed=self.list.move_down())
        if action is Action.BEGIN_SEARCH:
            return ActionResult(changed=self.begin_search())
        if action is Action.TYPE_CHAR:
            return ActionResult(changed=self.type_char(char))
        if action is Action.DELETE_CHAR:
            return ActionResult(changed=self.delete_char())
        if action is Action.CLEAR_QUERY:
            return ActionResult(changed=self.clear_query())
        if action is Action.COMMIT_SEARCH:
            return ActionResult(changed=self.commit_search())
        if action is Action.CANCEL_SEARCH:
            return ActionResult(changed=self.cancel_search())
        return UNHANDLED

    def frame(self, hint: tuple[str, ...] = ()) -> Frame:
        return Frame(
            title=self.title,
            rows=self.list.visible_rows(),
            cursor_row=self.list.cursor_row(),
            query_text=self.search.query_text,
            mode=self.search.mode,
            placeholder=self.placeholder,
            total=len(self.displayed),
            hint=hint,
        )
