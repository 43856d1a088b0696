#!/usr/bin/env python3
"""Play Hexapawn against a MENACE agent in the console and watch it learn between games."""

import argparse
import logging
import sys
from typing import Dict, List

from hexapawn import GameResult, MenaceAgent, MenaceConfig, Move, Side
from hexapawn.core import format_board, winner_of
from hexapawn.orchestration import GameSession


def pretrain(agent: MenaceAgent, side: Side, games: int, seed: int) -> None:
    sparring = MenaceAgent(MenaceConfig(seed=seed))
    if side == Side.WHITE:
        session = GameSession(white_agent=agent, black_agent=sparring)
    else:
        session = GameSession(white_agent=sparring, black_agent=agent)
    session.train(games)


def prompt_human_move(moves: List[Move]) -> Move:
    print("Legal moves:")
    for idx, move in enumerate(moves):
        print(f"  {idx}: {move}")
    while True:
        raw = input("Move index (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Goodbye.")
            sys.exit(0)
        if not raw.isdigit():
            print("Please enter a number.")
            continue
        idx = int(raw)
        if 0 <= idx < len(moves):
            return moves[idx]
        print("No move with that index, try again.")


def print_matchbox(agent: MenaceAgent, key: str) -> None:
    weights = agent.move_weights(key)
    if weights is None:
        print(f"AI has never seen {key}.")
        return
    print(f"AI matchbox for {key}:")
    for move, beads in sorted(weights.items(), key=lambda item: -item[1]):
        print(f"  {str(move):<14} {'o' * min(beads, 20)} ({beads})")


def record_result(scores: Dict[str, int], result: GameResult, human_side: Side) -> None:
    winner = winner_of(result)
    if winner is None:
        return
    scores["human" if winner == human_side else "ai"] += 1


def play_interactive(args: argparse.Namespace) -> None:
    human_side = Side.WHITE if args.human_side == "white" else Side.BLACK
    ai_side = human_side.opponent
    ai = MenaceAgent(MenaceConfig(initial_beads=args.initial_beads, seed=args.seed))
    if args.pretrain > 0:
        pretrain(ai, ai_side, args.pretrain, seed=args.seed + 1)
        print(f"AI pre-trained for {args.pretrain} games.")

    session = GameSession()
    if ai_side == Side.WHITE:
        session.white_agent = ai
    else:
        session.black_agent = ai

    scores = {"human": 0, "ai": 0}

    session.add_game_end_listener(lambda result: record_result(scores, result, human_side))
    session.add_move_listener(lambda move, side: print(f"{side.name} played {move}"))

    while True:
        session.start_new_game()
        while not session.state.is_terminal:
            state = session.state
            print("\nBoard (row 0 at top):")
            print(format_board(state))
            print(f"To move: {state.current_side.name}")
            if state.current_side == human_side:
                session.make_move(prompt_human_move(session.legal_moves()))
            else:
                key = session.current_key()
                session.make_ai_move()
                print_matchbox(ai, key)

        print("\nFinal board:")
        print(format_board(session.state))
        print(f"Result: {session.state.result.value}")
        print(f"Score  human {scores['human']} : {scores['ai']} AI")
        states, options = ai.learning_stats()
        print(f"AI knows {states} positions with {options} move options.")

        again = input("Play again? [Y/n]: ").strip().lower()
        if again in {"n", "no", "q"}:
            break


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Hexapawn in the console against a MENACE agent.")
    parser.add_argument("--human-side", choices=["white", "black"], default="white")
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--initial-beads", type=int, default=3)
    parser.add_argument("--pretrain", type=int, default=0, help="Self-play games before the first human game")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    play_interactive(args)


if __name__ == "__main__":
    main()
