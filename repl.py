import argparse
import logging

from smartcalc.session import Session


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Integer calculator with variables")
    parser.add_argument("--prompt", default="", help="Text shown before each input line")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, logs go to stderr",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    session = Session()

    while not session.finished:
        try:
            line = input(args.prompt)
        except EOFError:
            break

        output = session.process(line)
        if output is not None:
            print(output)
