import pytest

from hexapawn.agents import MenaceAgent, RandomAgent
from hexapawn.config import AgentSpec, RunConfig, load_run_config


def test_load_run_config_from_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        "games: 50\n"
        "report_every: 10\n"
        "white:\n"
        "  agent: random\n"
        "  seed: 4\n"
        "black:\n"
        "  agent: menace\n"
        "  initial_beads: 5\n"
        "  penalty_for_loss: 2\n"
        "  seed: 7\n"
    )

    cfg = load_run_config(path)

    assert cfg.games == 50
    assert cfg.report_every == 10
    assert cfg.evaluation_episodes == 0
    assert isinstance(cfg.white.build(), RandomAgent)
    black = cfg.black.build()
    assert isinstance(black, MenaceAgent)
    assert black.config.initial_beads == 5
    assert black.config.penalty_for_loss == 2
    assert black.config.reward_for_win == 3
    assert black.config.seed == 7


def test_missing_config_file_uses_defaults(tmp_path):
    cfg = load_run_config(tmp_path / "absent.yaml")
    assert cfg == RunConfig()
    assert load_run_config(None) == RunConfig()


def test_human_side_builds_no_agent():
    assert AgentSpec.from_dict({"agent": "human"}).build() is None


def test_unknown_options_are_rejected():
    with pytest.raises(ValueError):
        AgentSpec.from_dict({"agent": "minimax"})
    with pytest.raises(ValueError):
        AgentSpec.from_dict({"beads": 3})
    with pytest.raises(ValueError):
        RunConfig.from_dict({"episodes": 3})
