"""Sidebar directory browser over the grouped well-known/pinned/disks dataset."""

from __future__ import annotations

import logging

from ..input.keys import action_for_key, hint_for_mode
from ..list_model.actions import Action, ActionResult
from ..list_model.session import SearchSession
from ..list_model.types import Frame
from ..search.fuzzy import FuzzyScorer, default_scorer
from ..sources.sidebar import SidebarSources, build_sidebar_dataset

logger = logging.getLogger(__name__)

SIDEBAR_TITLE = "Directories"
SIDEBAR_PLACEHOLDER = "/ to search directories"


class SidebarDirectories:
    """Owns one sidebar session; ``refresh`` rebuilds it from the sources."""

    def __init__(
        self,
        sources: SidebarSources | None = None,
        scorer: FuzzyScorer | None = None,
        viewport_height: int = 10,
    ) -> None:
        self.sources = sources
        self.scorer = scorer if scorer is not None else default_scorer()
        self.viewport_height = max(1, viewport_height)
        self.open = False
        self.selected_path: str | None = None
        self.session: SearchSession | None = None

    def refresh(self) -> None:
        """Rebuild the dataset and start a fresh browse session."""
        dataset = build_sidebar_dataset(self.sources)
        self.session = SearchSession(
            dataset,
            self.scorer,
            viewport_height=self.viewport_height,
            title=SIDEBAR_TITLE,
            placeholder=SIDEBAR_PLACEHOLDER,
        )
        self.open = True
        self.selected_path = None
        logger.debug("sidebar refreshed with %d rows", len(dataset))

    def close(self) -> None:
        self.open = False
        self.session = None

    def resize(self, viewport_height: int) -> None:
        self.viewport_height = max(1, viewport_height)
        if self.session is not None:
            self.session.resize(self.viewport_height)

    def dispatch(self, action: Action, char: str = "") -> ActionResult:
        if self.session is None:
            return ActionResult(handled=False)
        result = self.session.dispatch(action, char)
        if result.selected is not None:
            self.selected_path = result.selected.key
        if result.close:
            self.close()
        return result

    def handle_key(self, key: str) -> ActionResult:
        if self.session is None:
            return ActionResult(handled=False)
        mapped = action_for_key(key, self.session.searching)
        if mapped is None:
            return ActionResult(handled=False)
        action, char = mapped
        return self.dispatch(action, char)

    def frame(self) -> Frame | None:
        if self.session is None:
            return None
        return self.session.frame(hint=hint_for_mode(self.session.searching))
