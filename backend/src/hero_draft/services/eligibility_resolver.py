"""Hero eligibility resolution for ban/protect drafts.

Each draft mode is a closed table of rules evaluated in order. A rule looks
at one hero and either returns a status (first match wins) or ``None`` to
defer to the next rule. Falling off the end of a table means the hero is
available. The ordering of each table is the conflict-resolution policy for
malformed histories, e.g. a hero that is both banned and protected.

MRC:
    global ban > team1 protect > team2 protect > available

MRI, evaluated relative to the acting team:
    protect: opponent ban > opponent protect (available) > own protect > available
    ban:     opponent protect > own ban > available
    neither: any ban > available
"""

from typing import Callable, Iterable, Optional

from hero_draft.models.draft import (
    ActionType,
    DraftContext,
    DraftMode,
    DraftState,
    HeroStatus,
    Team,
)
from hero_draft.models.hero import Hero

Rule = Callable[[str, DraftState, DraftContext], Optional[HeroStatus]]


# MRC rules

def _globally_banned(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    if state.is_banned(name):
        return HeroStatus.banned()
    return None


def _protected_by(team: Team) -> Rule:
    def rule(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
        if state.is_protected_by(name, team):
            return HeroStatus.protected(team)
        return None

    return rule


# MRI rules

def _banned_by_opponent(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    if state.is_banned_by(name, context.current_team.opponent):
        return HeroStatus.banned()
    return None


def _protected_by_opponent_still_protectable(
    name: str, state: DraftState, context: DraftContext
) -> Optional[HeroStatus]:
    # Protections are private to each team; the opponent's shield does not
    # stop the acting team from protecting the same hero.
    if state.is_protected_by(name, context.current_team.opponent):
        return HeroStatus.available()
    return None


def _protected_by_current_team(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    if state.is_protected_by(name, context.current_team):
        return HeroStatus.protected(context.current_team)
    return None


def _protected_against_ban(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    opponent = context.current_team.opponent
    if state.is_protected_by(name, opponent):
        return HeroStatus.protected(opponent)
    return None


def _banned_by_current_team(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    if state.is_banned_by(name, context.current_team):
        return HeroStatus.banned_by_current_team(context.current_team)
    return None


def _banned_by_either_team(name: str, state: DraftState, context: DraftContext) -> Optional[HeroStatus]:
    if state.is_banned_by(name, Team.TEAM1) or state.is_banned_by(name, Team.TEAM2):
        return HeroStatus.banned()
    return None


MRC_RULES: tuple[Rule, ...] = (
    _globally_banned,
    _protected_by(Team.TEAM1),
    _protected_by(Team.TEAM2),
)

# An opponent's ban does not show up here: MRI bans only restrict the team
# they were issued against, so the acting team may still ban the hero.
MRI_BAN_RULES: tuple[Rule, ...] = (
    _protected_against_ban,
    _banned_by_current_team,
)

MRI_PROTECT_RULES: tuple[Rule, ...] = (
    _banned_by_opponent,
    _protected_by_opponent_still_protectable,
    _protected_by_current_team,
)

MRI_DISPLAY_RULES: tuple[Rule, ...] = (
    _banned_by_either_team,
)

MRI_RULES: dict[Optional[ActionType], tuple[Rule, ...]] = {
    ActionType.BAN: MRI_BAN_RULES,
    ActionType.PROTECT: MRI_PROTECT_RULES,
    None: MRI_DISPLAY_RULES,
}


def rules_for(mode: DraftMode, action: Optional[ActionType]) -> tuple[Rule, ...]:
    """Return the rule table that applies to ``mode`` and ``action``."""
    if mode == DraftMode.MRI:
        return MRI_RULES.get(action, MRI_DISPLAY_RULES)
    return MRC_RULES


def resolve_status(
    hero: Hero,
    state: DraftState,
    context: DraftContext,
    mode: DraftMode,
) -> HeroStatus:
    """Classify ``hero`` for the acting team.

    Pure and total: every combination of inputs maps to exactly one status,
    and nothing is written to ``state`` or ``context``.
    """
    for rule in rules_for(mode, context.current_action):
        status = rule(hero.name, state, context)
        if status is not None:
            return status
    return HeroStatus.available()


def resolve_grid(
    heroes: Iterable[Hero],
    state: DraftState,
    context: DraftContext,
    mode: DraftMode,
) -> list[tuple[Hero, HeroStatus]]:
    """Resolve every hero in catalog order."""
    return [(hero, resolve_status(hero, state, context, mode)) for hero in heroes]
