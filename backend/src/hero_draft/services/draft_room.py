"""Draft room: owns the history of one draft and advances its turns."""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from hero_draft.models.draft import (
    ActionType,
    DraftAction,
    DraftConfiguration,
    DraftContext,
    DraftState,
    HeroStatus,
    Team,
)
from hero_draft.models.hero import Hero
from hero_draft.services.draft_sequence import Step, build_draft_sequence
from hero_draft.services.eligibility_resolver import resolve_grid
from hero_draft.services.selection_commit import SelectionCommit

logger = logging.getLogger(__name__)


class DraftError(ValueError):
    """Raised when a draft is driven in a way its rules do not allow."""


class DraftCompleteError(DraftError):
    """Raised when an action is applied after the last turn."""


@dataclass
class DraftRoom:
    """A single ban/protect draft between two teams.

    The room is the only writer of its ``DraftState``: committed selections
    come back through ``fold_selection`` and are appended to the right set
    for the team and action of the current turn.
    """

    id: str
    config: DraftConfiguration
    state: DraftState = field(default_factory=DraftState)
    history: list[DraftAction] = field(default_factory=list)
    step_index: int = 0
    created_at: float = field(default_factory=time.time)
    last_access: float = field(default_factory=time.time)

    def __post_init__(self):
        self.sequence: list[Step] = build_draft_sequence(self.config)
        self.selection = SelectionCommit(on_select=self.fold_selection)

    @property
    def is_complete(self) -> bool:
        return self.step_index >= len(self.sequence)

    @property
    def current_step(self) -> Optional[Step]:
        if self.is_complete:
            return None
        return self.sequence[self.step_index]

    @property
    def current_team(self) -> Team:
        step = self.current_step
        if step is None:
            return self.sequence[-1][0] if self.sequence else self.config.starting_team
        return step[0]

    @property
    def current_action(self) -> Optional[ActionType]:
        step = self.current_step
        return step[1] if step else None

    @property
    def context(self) -> DraftContext:
        """Turn context for rendering the hero grid."""
        return DraftContext(
            current_team=self.current_team,
            current_action=self.current_action,
            disabled=self.is_complete or self.selection.is_prompt_open,
        )

    def remaining(self, team: Team, action: ActionType) -> int:
        """Turns of ``action`` still owed to ``team``."""
        return sum(
            1 for t, a in self.sequence[self.step_index:] if t == team and a == action
        )

    def grid(self, heroes: Iterable[Hero]) -> list[tuple[Hero, HeroStatus]]:
        return resolve_grid(heroes, self.state, self.context, self.config.mode)

    def propose(self, hero: Hero) -> bool:
        """Open the confirmation prompt for ``hero`` if it can be selected."""
        return self.selection.propose(hero, self.state, self.context, self.config.mode)

    def confirm(self) -> Optional[DraftAction]:
        """Commit the pending selection and return the recorded action."""
        if self.selection.confirm() is None:
            return None
        return self.history[-1]

    def cancel(self) -> None:
        self.selection.cancel()

    def fold_selection(self, hero_name: str) -> DraftAction:
        """Apply a committed hero to the current turn and advance.

        Raises:
            DraftCompleteError: If every turn has already been played
        """
        step = self.current_step
        if step is None:
            raise DraftCompleteError(f"Draft {self.id} is already complete")
        team, action = step

        if action == ActionType.BAN:
            self.state = self.state.with_ban(hero_name, team, self.config.mode)
        else:
            self.state = self.state.with_protect(hero_name, team)

        recorded = DraftAction(
            sequence=len(self.history) + 1,
            action_type=action,
            team=team,
            hero_name=hero_name,
        )
        self.history.append(recorded)
        self.step_index += 1

        logger.info(
            f"Room {self.id}: {self.config.team_name(team)} {action.value} {hero_name} "
            f"({self.step_index}/{len(self.sequence)})"
        )
        if self.is_complete:
            logger.info(f"Room {self.id}: draft complete")
        return recorded
