"""Two-phase hero selection: propose, then confirm or cancel."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from hero_draft.models.draft import ActionType, DraftContext, DraftMode, DraftState, Team
from hero_draft.models.hero import Hero
from hero_draft.services.eligibility_resolver import resolve_status

logger = logging.getLogger(__name__)


class SelectionPhase(str, Enum):
    """Phases of the selection gate."""

    IDLE = "idle"  # No candidate, prompt closed
    PENDING = "pending"  # One candidate awaiting confirmation


@dataclass(frozen=True)
class SelectionState:
    """Current phase of the gate plus the candidate it holds, if any."""

    phase: SelectionPhase
    hero_name: Optional[str] = None
    action: Optional[ActionType] = None
    team: Optional[Team] = None

    @classmethod
    def idle(cls) -> "SelectionState":
        return cls(SelectionPhase.IDLE)

    @classmethod
    def pending(
        cls, hero_name: str, action: Optional[ActionType], team: Team
    ) -> "SelectionState":
        return cls(SelectionPhase.PENDING, hero_name, action, team)


class SelectionCommit:
    """Gate between a click on a hero and a committed draft action.

    ``propose`` holds a single candidate and opens the confirmation prompt;
    ``confirm`` hands it to ``on_select`` exactly once; ``cancel`` drops it.
    Invalid calls leave the gate untouched instead of raising.
    """

    def __init__(self, on_select: Callable[[str], None]):
        self._on_select = on_select
        self._state = SelectionState.idle()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def pending_hero(self) -> Optional[str]:
        return self._state.hero_name

    @property
    def is_prompt_open(self) -> bool:
        return self._state.phase == SelectionPhase.PENDING

    def propose(
        self,
        hero: Hero,
        state: DraftState,
        context: DraftContext,
        mode: DraftMode,
    ) -> bool:
        """Hold ``hero`` as the candidate if it may be selected right now.

        Returns:
            True if the hero is now pending, False if the proposal was ignored
        """
        if self._state.phase != SelectionPhase.IDLE:
            logger.debug(f"Ignoring proposal of {hero.name}: {self._state.hero_name} is pending")
            return False
        if context.disabled:
            logger.debug(f"Ignoring proposal of {hero.name}: input disabled")
            return False

        status = resolve_status(hero, state, context, mode)
        if not status.is_available:
            logger.debug(f"Ignoring proposal of {hero.name}: status is {status.kind.value}")
            return False

        self._state = SelectionState.pending(hero.name, context.current_action, context.current_team)
        return True

    def confirm(self) -> Optional[str]:
        """Commit the pending candidate.

        Returns:
            The committed hero name, or None if nothing was pending
        """
        if self._state.phase != SelectionPhase.PENDING:
            return None

        hero_name = self._state.hero_name
        # A failing callback leaves the candidate pending so it can be retried
        # or cancelled.
        self._on_select(hero_name)
        self._state = SelectionState.idle()
        return hero_name

    def cancel(self) -> None:
        """Drop any pending candidate and close the prompt."""
        self._state = SelectionState.idle()
