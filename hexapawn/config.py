"""Run configuration for the training and play scripts.

A run is described by a YAML file such as ``configs/menace.yaml``::

    games: 200
    evaluation_episodes: 100
    white:
      agent: menace
      seed: 456
    black:
      agent: menace
      initial_beads: 3
      seed: 123

Command-line flags override individual values after the file is loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml

from hexapawn.agents import Agent, MenaceAgent, MenaceConfig, RandomAgent

AGENT_KINDS = ("menace", "random", "human")


@dataclass
class AgentSpec:
    agent: str = "menace"
    menace: MenaceConfig = field(default_factory=MenaceConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AgentSpec":
        data = dict(data or {})
        kind = data.pop("agent", "menace")
        if kind not in AGENT_KINDS:
            raise ValueError(f"Unknown agent kind {kind!r}; expected one of {AGENT_KINDS}.")
        known = {f.name for f in fields(MenaceConfig)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown agent options: {sorted(unknown)}")
        return cls(agent=kind, menace=MenaceConfig(**data))

    def build(self) -> Optional[Agent]:
        """Create the agent; ``human`` sides have none."""
        if self.agent == "menace":
            return MenaceAgent(self.menace)
        if self.agent == "random":
            return RandomAgent(np.random.default_rng(self.menace.seed))
        return None


@dataclass
class RunConfig:
    games: int = 200
    evaluation_episodes: int = 0
    report_every: int = 0
    white: AgentSpec = field(default_factory=AgentSpec)
    black: AgentSpec = field(default_factory=AgentSpec)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RunConfig":
        data = dict(data or {})
        white = AgentSpec.from_dict(data.pop("white", None))
        black = AgentSpec.from_dict(data.pop("black", None))
        known = {f.name for f in fields(cls)} - {"white", "black"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown run options: {sorted(unknown)}")
        return cls(white=white, black=black, **data)


def load_run_config(path: Optional[Union[str, Path]]) -> RunConfig:
    """Read a run config; a missing file gives the defaults."""
    if path is None:
        return RunConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return RunConfig()
    return RunConfig.from_dict(yaml.safe_load(cfg_path.read_text()) or {})
