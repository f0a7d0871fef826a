"""Entry point for playing Tank Battalion."""

import argparse
import logging

from battalion_game import run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Tank Battalion arcade defence")
    parser.add_argument(
        "--prompt",
        default=None,
        help="describe a battlefield and start on a generated level",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for levels and enemy AI")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)-5s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    run_pygame(level_prompt=args.prompt, seed=args.seed, debug=args.debug)


if __name__ == "__main__":
    main()
