#!/usr/bin/env python3
"""Train MENACE agents against each other (or a random baseline) and report progress."""

import argparse
import json
import logging

from tqdm.auto import tqdm

from hexapawn import GameResult, MenaceAgent, RandomAgent, evaluate_agents
from hexapawn.config import load_run_config
from hexapawn.orchestration import GameSession


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/menace.yaml")
    parser.add_argument("--games", type=int)
    parser.add_argument("--white", choices=["menace", "random"])
    parser.add_argument("--black", choices=["menace", "random"])
    parser.add_argument("--white-seed", type=int)
    parser.add_argument("--black-seed", type=int)
    parser.add_argument("--report-every", type=int)
    parser.add_argument("--evaluation-episodes", type=int)
    parser.add_argument("--show-matchboxes", choices=["white", "black"])
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = load_run_config(args.config)
    if args.games is not None:
        cfg.games = args.games
    if args.white is not None:
        cfg.white.agent = args.white
    if args.black is not None:
        cfg.black.agent = args.black
    if args.white_seed is not None:
        cfg.white.menace.seed = args.white_seed
    if args.black_seed is not None:
        cfg.black.menace.seed = args.black_seed
    if args.report_every is not None:
        cfg.report_every = args.report_every
    if args.evaluation_episodes is not None:
        cfg.evaluation_episodes = args.evaluation_episodes

    white = cfg.white.build()
    black = cfg.black.build()
    if white is None or black is None:
        parser.error("Training needs an agent on both sides.")

    session = GameSession(white_agent=white, black_agent=black)
    progress = tqdm(total=cfg.games, desc="Games")
    tally = {GameResult.WHITE_WIN: 0, GameResult.BLACK_WIN: 0, GameResult.DRAW: 0}

    def on_progress(game_number: int, result: GameResult) -> None:
        tally[result] += 1
        progress.update(1)
        if cfg.report_every and game_number % cfg.report_every == 0:
            progress.write(
                json.dumps(
                    {
                        "game": game_number,
                        "white_wins": tally[GameResult.WHITE_WIN],
                        "black_wins": tally[GameResult.BLACK_WIN],
                    }
                )
            )

    try:
        history = session.train(cfg.games, progress_callback=on_progress)
    finally:
        progress.close()

    output = {
        "games": cfg.games,
        "white_wins": tally[GameResult.WHITE_WIN],
        "black_wins": tally[GameResult.BLACK_WIN],
        "draws": tally[GameResult.DRAW],
        "final": history[-1].as_dict() if history else None,
    }
    for label, agent in (("white", white), ("black", black)):
        if isinstance(agent, MenaceAgent):
            states, options = agent.learning_stats()
            output[f"{label}_states_learned"] = states
            output[f"{label}_move_options"] = options

    if cfg.evaluation_episodes > 0:
        # Frozen agents against a fresh random opponent on each side.
        baseline = RandomAgent()
        as_white = evaluate_agents(white, baseline, episodes=cfg.evaluation_episodes)
        as_black = evaluate_agents(baseline, black, episodes=cfg.evaluation_episodes)
        output["evaluation"] = {
            "white_vs_random_winrate": as_white.winrate_white(),
            "black_vs_random_winrate": as_black.winrate_black(),
        }

    if args.show_matchboxes:
        agent = white if args.show_matchboxes == "white" else black
        if isinstance(agent, MenaceAgent):
            output["matchboxes"] = agent.snapshot()

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
