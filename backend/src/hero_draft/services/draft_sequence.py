"""Turn order for each draft format."""

from hero_draft.models.draft import ActionType, DraftConfiguration, DraftMode, Team

Step = tuple[Team, ActionType]

# MRI is fixed: (action, rounds) where each round gives both teams one turn.
MRI_PHASES: tuple[tuple[ActionType, int], ...] = (
    (ActionType.BAN, 2),
    (ActionType.PROTECT, 1),
    (ActionType.BAN, 2),
    (ActionType.PROTECT, 1),
)


def _alternating(first: Team, action: ActionType, rounds: int) -> list[Step]:
    steps: list[Step] = []
    for _ in range(rounds):
        steps.append((first, action))
        steps.append((first.opponent, action))
    return steps


def build_draft_sequence(config: DraftConfiguration) -> list[Step]:
    """Return the full ordered list of (team, action) turns for a draft.

    MRC runs a protect phase followed by a ban phase, each alternating from
    the starting team. MRI interleaves ban and protect rounds in a fixed
    pattern of 4 bans and 2 protects per team.
    """
    first = config.starting_team

    if config.mode == DraftMode.MRI:
        steps: list[Step] = []
        for action, rounds in MRI_PHASES:
            steps.extend(_alternating(first, action, rounds))
        return steps

    return (
        _alternating(first, ActionType.PROTECT, config.effective_protects_per_team)
        + _alternating(first, ActionType.BAN, config.effective_bans_per_team)
    )
