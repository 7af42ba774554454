"""Simple entrypoint to run the outfit scoring evaluation locally."""

import json

from evaluation.harness import run_evaluation_suite


def main() -> None:
    print(json.dumps(run_evaluation_suite(), indent=2))


if __name__ == "__main__":
    main()
