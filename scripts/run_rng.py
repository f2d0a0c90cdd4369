"""Command line harness for drawing, saving and resuming pcg-leap sequences."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_STATE_PATH = PROJECT_ROOT / "rng_logs" / "latest_state.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from pcg_leap import DEFAULT_INCREMENT, DEFAULT_SEED, SessionConfig, resume_session, run_session

logger = logging.getLogger("pcg_leap.cli")


def _parse_int(value: str) -> int:
    """Accept decimal, 0x hex, 0o octal or 0b binary literals."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer literal, received '{value}'.") from exc


def _parse_count(value: str) -> int:
    count = _parse_int(value)
    if count < 0:
        raise argparse.ArgumentTypeError("Draw count must be zero or positive.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw from the pcg-leap jump-ahead generator")
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=DEFAULT_SEED,
        help="64-bit seed (accepts decimal or 0x-prefixed hex; negatives wrap)",
    )
    parser.add_argument(
        "--increment",
        type=_parse_int,
        default=DEFAULT_INCREMENT,
        help="64-bit LCG increment",
    )
    parser.add_argument(
        "--start",
        type=_parse_int,
        default=0,
        help="Step count to jump to before drawing",
    )
    parser.add_argument("--draws", type=_parse_count, default=10, help="Number of values to draw")
    parser.add_argument(
        "--skip",
        type=_parse_int,
        default=1,
        help="Steps between consecutive draws (jump-ahead, negatives rewind)",
    )
    parser.add_argument(
        "--resume",
        type=Path,
        help="Continue from a state file written by --save; ignores --seed/--increment/--start",
    )
    parser.add_argument(
        "--save",
        nargs="?",
        type=Path,
        const=DEFAULT_STATE_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "rng_logs/latest_state.json under the repository root."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr",
    )
    return parser


def _resolve(path: Path) -> Path:
    if not path.is_absolute():
        path = (PROJECT_ROOT / path).resolve()
    return path


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.resume is not None:
        resume_path = _resolve(args.resume)
        if not resume_path.exists():
            raise FileNotFoundError(f"Missing state file: {resume_path}")
        payload = json.loads(resume_path.read_text())
        # Accept either a full report or a bare state bundle.
        state = payload.get("state", payload)
        result = resume_session(state, draws=args.draws, skip=args.skip)
    else:
        cfg = SessionConfig(
            seed=args.seed,
            increment=args.increment,
            start=args.start,
            draws=args.draws,
            skip=args.skip,
        )
        result = run_session(cfg)

    save_path = args.save
    if save_path is not None:
        save_path = _resolve(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        save_path.write_text(json.dumps(result, indent=2))
        logger.info("saved state to %s", save_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
