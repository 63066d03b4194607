"""Draft configuration, state and status models."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

MRI_BANS_PER_TEAM = 4
MRI_PROTECTS_PER_TEAM = 2

MAX_BANS_PER_TEAM = 5
MAX_PROTECTS_PER_TEAM = 4


class DraftMode(str, Enum):
    """Supported draft formats."""

    MRC = "MRC"  # Championship: global bans, configurable counts
    MRI = "MRI"  # Ignite: team-scoped bans, fixed 4 bans / 2 protects


class Team(str, Enum):
    """The two drafting teams."""

    TEAM1 = "team1"
    TEAM2 = "team2"

    @property
    def opponent(self) -> "Team":
        return Team.TEAM2 if self is Team.TEAM1 else Team.TEAM1


class ActionType(str, Enum):
    """Kinds of draft action."""

    BAN = "ban"
    PROTECT = "protect"


class StatusKind(str, Enum):
    """Eligibility of a hero from the acting team's point of view."""

    AVAILABLE = "available"
    BANNED = "banned"
    BANNED_BY_CURRENT_TEAM = "banned-by-current-team"
    PROTECTED = "protected"


@dataclass(frozen=True)
class DraftConfiguration:
    """Room settings captured once at creation."""

    mode: DraftMode = DraftMode.MRC
    team1_name: str = "Team 1"
    team2_name: str = "Team 2"
    starting_team: Team = Team.TEAM1
    bans_per_team: int = 3  # MRC only
    protects_per_team: int = 2  # MRC only

    def __post_init__(self):
        if self.mode == DraftMode.MRC:
            if not 1 <= self.bans_per_team <= MAX_BANS_PER_TEAM:
                raise ValueError(
                    f"bans_per_team must be between 1 and {MAX_BANS_PER_TEAM}, got {self.bans_per_team}"
                )
            if not 1 <= self.protects_per_team <= MAX_PROTECTS_PER_TEAM:
                raise ValueError(
                    f"protects_per_team must be between 1 and {MAX_PROTECTS_PER_TEAM}, "
                    f"got {self.protects_per_team}"
                )

    @property
    def effective_bans_per_team(self) -> int:
        """Bans each team gets; MRI ignores the configured value."""
        if self.mode == DraftMode.MRI:
            return MRI_BANS_PER_TEAM
        return self.bans_per_team

    @property
    def effective_protects_per_team(self) -> int:
        """Protects each team gets; MRI ignores the configured value."""
        if self.mode == DraftMode.MRI:
            return MRI_PROTECTS_PER_TEAM
        return self.protects_per_team

    def team_name(self, team: Team) -> str:
        return self.team1_name if team == Team.TEAM1 else self.team2_name


def ban_record(hero_name: str, team: Team, mode: DraftMode) -> str:
    """Serialize a ban the way it is stored in ``DraftState.banned_heroes``.

    MRC bans are global so the record is the bare hero name. MRI bans belong
    to the team that issued them and are stored as ``"<name>:<team>"``.
    """
    if mode == DraftMode.MRI:
        return f"{hero_name}:{team.value}"
    return hero_name


@dataclass(frozen=True)
class DraftState:
    """Accumulated ban/protect history of one draft.

    The state only ever grows: ``with_ban`` and ``with_protect`` return a new
    state that contains everything the old one did.
    """

    banned_heroes: frozenset[str] = field(default_factory=frozenset)
    team1_protected: frozenset[str] = field(default_factory=frozenset)
    team2_protected: frozenset[str] = field(default_factory=frozenset)

    def is_banned(self, hero_name: str) -> bool:
        """Global (MRC) ban check."""
        return hero_name in self.banned_heroes

    def is_banned_by(self, hero_name: str, team: Team) -> bool:
        """Team-scoped (MRI) ban check."""
        return ban_record(hero_name, team, DraftMode.MRI) in self.banned_heroes

    def protected_by(self, team: Team) -> frozenset[str]:
        return self.team1_protected if team == Team.TEAM1 else self.team2_protected

    def is_protected_by(self, hero_name: str, team: Team) -> bool:
        return hero_name in self.protected_by(team)

    def with_ban(self, hero_name: str, team: Team, mode: DraftMode) -> "DraftState":
        return replace(
            self,
            banned_heroes=self.banned_heroes | {ban_record(hero_name, team, mode)},
        )

    def with_protect(self, hero_name: str, team: Team) -> "DraftState":
        if team == Team.TEAM1:
            return replace(self, team1_protected=self.team1_protected | {hero_name})
        return replace(self, team2_protected=self.team2_protected | {hero_name})


@dataclass(frozen=True)
class DraftContext:
    """Per-render inputs that are not part of the persisted history."""

    current_team: Team
    current_action: Optional[ActionType]  # None renders the display-only view
    disabled: bool = False


@dataclass(frozen=True)
class HeroStatus:
    """Derived eligibility of a single hero. Never stored."""

    kind: StatusKind
    team: Optional[Team] = None  # Protecting team, or the acting team for self-bans

    @classmethod
    def available(cls) -> "HeroStatus":
        return cls(StatusKind.AVAILABLE)

    @classmethod
    def banned(cls) -> "HeroStatus":
        return cls(StatusKind.BANNED)

    @classmethod
    def banned_by_current_team(cls, team: Team) -> "HeroStatus":
        return cls(StatusKind.BANNED_BY_CURRENT_TEAM, team)

    @classmethod
    def protected(cls, team: Team) -> "HeroStatus":
        return cls(StatusKind.PROTECTED, team)

    @property
    def is_available(self) -> bool:
        return self.kind == StatusKind.AVAILABLE


@dataclass
class DraftAction:
    """A single committed ban or protect."""

    sequence: int  # 1-based
    action_type: ActionType
    team: Team
    hero_name: str
