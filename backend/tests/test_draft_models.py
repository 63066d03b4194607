"""Tests for draft models."""

import dataclasses

import pytest

from hero_draft.models.draft import (
    DraftConfiguration,
    DraftMode,
    DraftState,
    HeroStatus,
    StatusKind,
    Team,
    ban_record,
)


def test_team_opponent():
    assert Team.TEAM1.opponent is Team.TEAM2
    assert Team.TEAM2.opponent is Team.TEAM1


class TestDraftConfiguration:
    def test_defaults_match_creation_form(self):
        config = DraftConfiguration()
        assert config.mode == DraftMode.MRC
        assert config.team1_name == "Team 1"
        assert config.team2_name == "Team 2"
        assert config.starting_team == Team.TEAM1
        assert config.bans_per_team == 3
        assert config.protects_per_team == 2

    def test_mri_counts_are_fixed(self):
        """Supplied counts are ignored in MRI."""
        config = DraftConfiguration(mode=DraftMode.MRI, bans_per_team=1, protects_per_team=4)
        assert config.effective_bans_per_team == 4
        assert config.effective_protects_per_team == 2

    def test_mri_skips_count_validation(self):
        config = DraftConfiguration(mode=DraftMode.MRI, bans_per_team=0, protects_per_team=0)
        assert config.effective_bans_per_team == 4

    def test_mrc_counts_are_used(self):
        config = DraftConfiguration(bans_per_team=5, protects_per_team=1)
        assert config.effective_bans_per_team == 5
        assert config.effective_protects_per_team == 1

    @pytest.mark.parametrize("bans,protects", [(0, 2), (6, 2), (3, 0), (3, 5)])
    def test_mrc_rejects_out_of_range_counts(self, bans, protects):
        with pytest.raises(ValueError):
            DraftConfiguration(bans_per_team=bans, protects_per_team=protects)

    def test_is_immutable(self):
        config = DraftConfiguration()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.team1_name = "Other"

    def test_team_name(self):
        config = DraftConfiguration(team1_name="Sentinels", team2_name="Fnatic")
        assert config.team_name(Team.TEAM1) == "Sentinels"
        assert config.team_name(Team.TEAM2) == "Fnatic"


class TestDraftState:
    def test_ban_record_format(self):
        assert ban_record("Hulk", Team.TEAM1, DraftMode.MRC) == "Hulk"
        assert ban_record("Hulk", Team.TEAM2, DraftMode.MRI) == "Hulk:team2"

    def test_with_ban_is_append_only(self):
        empty = DraftState()
        state = empty.with_ban("Hulk", Team.TEAM1, DraftMode.MRI)
        state = state.with_ban("Storm", Team.TEAM2, DraftMode.MRI)

        assert empty.banned_heroes == frozenset()
        assert state.banned_heroes == {"Hulk:team1", "Storm:team2"}
        assert state.is_banned_by("Hulk", Team.TEAM1)
        assert not state.is_banned_by("Hulk", Team.TEAM2)
        assert not state.is_banned("Hulk")

    def test_mrc_ban_is_global(self):
        state = DraftState().with_ban("Hulk", Team.TEAM1, DraftMode.MRC)
        assert state.is_banned("Hulk")
        assert not state.is_banned_by("Hulk", Team.TEAM1)

    def test_with_protect_is_team_scoped(self):
        state = DraftState().with_protect("Hulk", Team.TEAM2)
        assert state.is_protected_by("Hulk", Team.TEAM2)
        assert not state.is_protected_by("Hulk", Team.TEAM1)
        assert state.protected_by(Team.TEAM1) == frozenset()


def test_hero_status_constructors():
    assert HeroStatus.available().kind == StatusKind.AVAILABLE
    assert HeroStatus.available().team is None
    assert HeroStatus.protected(Team.TEAM1).team == Team.TEAM1
    assert HeroStatus.banned_by_current_team(Team.TEAM2).kind.value == "banned-by-current-team"
    assert not HeroStatus.banned().is_available
