"""Tests for GameSession: validation, recoloring and the mission lifecycle."""

import logging

import pytest

from territory_war.engine.missions import MissionEngine
from territory_war.engine.session import GameSession, MissionState
from territory_war.models import (
    ControlCount,
    EliminateColor,
    InsufficientTroopsError,
    InvalidSelfAttackError,
    IndexOutOfRangeError,
    NoMission,
    TerritoryRegistry,
)
from territory_war.utils import GameRNG


def master_session(rng, mission=EliminateColor("Verde")):
    return GameSession(registry=TerritoryRegistry.demo(), rng=rng, mission=mission)


class TestAttack:
    """Combat through the session."""

    def test_conquest_recolors_defender(self, scripted_rng):
        # Fortaleza (Amarelo, 5) attacks Vale (Verde, 1)
        session = master_session(scripted_rng(rolls=[4, 2]))

        report = session.attack(3, 4)

        vale = session.registry.get(4)
        assert report.outcome.conquered is True
        assert vale.color == "Amarelo"
        assert vale.troops == 1
        assert session.registry.get(3).troops == 4
        assert report.recolored is True
        assert report.defender_color_before == "Verde"
        assert report.defender_color_after == "Amarelo"

    def test_adventurer_session_keeps_colors(self, scripted_rng):
        registry = TerritoryRegistry.demo()
        session = GameSession.adventurer(registry, scripted_rng(rolls=[4, 2]))

        report = session.attack(3, 4)

        assert report.outcome.conquered is True
        assert registry.get(4).color == "Verde"
        assert report.recolored is False
        assert isinstance(session.mission, NoMission)

    def test_no_recolor_without_conquest(self, scripted_rng):
        session = master_session(scripted_rng(rolls=[6, 1]))

        report = session.attack(0, 1)  # Aldea (3) vs Montanha (4)

        assert report.outcome.conquered is False
        assert session.registry.get(1).color == "Vermelho"
        assert session.registry.get(1).troops == 3

    def test_report_records_before_and_after(self, scripted_rng):
        session = master_session(scripted_rng(rolls=[2, 5]))

        report = session.attack(2, 1)  # Planície (2) vs Montanha (4)

        assert report.attacker_name == "Planície"
        assert report.defender_name == "Montanha"
        assert report.attacker_troops_before == 2
        assert report.defender_troops_before == 4
        assert report.attacker_troops_after == 1
        assert report.defender_troops_after == 4
        assert report.outcome.attacker_won is False

    def test_history_in_order(self, scripted_rng):
        session = master_session(scripted_rng(rolls=[1, 6, 6, 1]))

        session.attack(1, 2)
        session.attack(3, 0)

        assert [(r.attacker_index, r.defender_index) for r in session.history] == [(1, 2), (3, 0)]

    @pytest.mark.parametrize(
        "attacker,defender,error",
        [
            (0, 0, InvalidSelfAttackError),
            (0, 5, IndexOutOfRangeError),
            (-1, 2, IndexOutOfRangeError),
        ],
    )
    def test_rejected_attack_changes_nothing(self, scripted_rng, attacker, defender, error):
        rng = scripted_rng(rolls=[6, 1])
        session = master_session(rng)
        before = [(t.color, t.troops) for t in session.registry]

        with pytest.raises(error):
            session.attack(attacker, defender)

        assert [(t.color, t.troops) for t in session.registry] == before
        assert session.history == []
        assert rng.rolls == [6, 1]  # no dice drawn

    def test_attacker_without_troops_rejected(self, scripted_rng):
        session = master_session(scripted_rng())
        session.registry.get(0).troops = 0

        with pytest.raises(InsufficientTroopsError):
            session.attack(0, 1)

    def test_attack_logs_result(self, scripted_rng, caplog):
        session = master_session(scripted_rng(rolls=[4, 2]))

        with caplog.at_level(logging.INFO, logger="territory_war.engine.session"):
            session.attack(3, 4)

        assert "Vale conquered" in caplog.text


class TestMissionLifecycle:
    """ASSIGNED -> FAILED/SUCCEEDED -> reroll/retain."""

    def test_master_session_draws_mission(self, scripted_rng):
        session = GameSession.master(scripted_rng(picks=[1]))
        assert session.mission == ControlCount(3)
        assert session.mission_state is MissionState.ASSIGNED
        assert session.recolor_on_conquest is True
        assert len(session.registry) == 5

    def test_master_session_custom_size(self):
        session = GameSession.master(GameRNG(3), size=8)
        assert len(session.registry) == 8

    def test_failed_check(self, scripted_rng):
        session = master_session(scripted_rng())
        assert session.check_mission() is False
        assert session.mission_state is MissionState.FAILED

    def test_successful_check_then_reroll(self, scripted_rng):
        session = master_session(scripted_rng(picks=[1]))
        session.registry.get(0).troops = 0
        session.registry.get(4).troops = 0

        assert session.check_mission() is True
        assert session.mission_state is MissionState.SUCCEEDED

        new_mission = session.reroll_mission()
        assert new_mission == ControlCount(3)
        assert session.mission == ControlCount(3)
        assert session.mission_state is MissionState.ASSIGNED

    def test_successful_check_then_retain(self, scripted_rng):
        session = master_session(scripted_rng(), mission=ControlCount(3))
        assert session.check_mission() is True

        assert session.retain_mission() == ControlCount(3)
        assert session.mission_state is MissionState.ASSIGNED

    def test_reroll_requires_success(self, scripted_rng):
        session = master_session(scripted_rng())
        with pytest.raises(RuntimeError, match="assigned"):
            session.reroll_mission()

        session.check_mission()
        with pytest.raises(RuntimeError, match="failed"):
            session.retain_mission()

    def test_attack_after_success_returns_to_assigned(self, scripted_rng):
        session = master_session(scripted_rng(rolls=[1, 6]), mission=ControlCount(3))
        session.check_mission()

        session.attack(0, 1)

        assert session.mission_state is MissionState.ASSIGNED
        with pytest.raises(RuntimeError):
            session.reroll_mission()

    def test_no_mission_never_succeeds(self, scripted_rng):
        session = GameSession.adventurer(TerritoryRegistry.demo(), scripted_rng())
        assert session.check_mission() is False

    def test_custom_mission_engine(self, scripted_rng):
        rng = scripted_rng(picks=[0])
        engine = MissionEngine(rng, catalog=[EliminateColor("Azul")])
        session = GameSession(
            registry=TerritoryRegistry.demo(),
            rng=rng,
            mission=ControlCount(1),
            mission_engine=engine,
        )
        session.check_mission()
        assert session.reroll_mission() == EliminateColor("Azul")

    def test_conquests_can_finish_eliminate_mission(self, scripted_rng):
        # Fortaleza takes Vale; Montanha empties Aldea over three rounds
        session = master_session(scripted_rng(rolls=[6, 1, 6, 1, 6, 1, 6, 1]))

        session.attack(3, 4)
        assert session.check_mission() is False  # Aldea still green

        for _ in range(3):
            session.attack(1, 0)

        aldea = session.registry.get(0)
        assert aldea.color == "Vermelho"
        assert session.check_mission() is True
