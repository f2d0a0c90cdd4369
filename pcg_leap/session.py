"""Configured draw sessions that can be saved and resumed exactly."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Union

from .generator import Generator
from .models import DEFAULT_INCREMENT, DEFAULT_SEED, RngState

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a batch of draws."""

    seed: int = DEFAULT_SEED
    increment: int = DEFAULT_INCREMENT
    start: int = 0  # step count to position at before drawing
    draws: int = 10
    skip: int = 1  # steps between consecutive draws


def _draw(rng: Generator, draws: int, skip: int) -> List[float]:
    return [rng.nth_skip(skip) for _ in range(draws)]


def run_session(cfg: SessionConfig) -> Dict[str, Any]:
    """Draw ``cfg.draws`` values and report them with the state to resume from."""

    rng = Generator(cfg.seed, cfg.increment)
    if cfg.start:
        rng.set_state_count(cfg.start)
    logger.info(
        "session seed=%#x start=%d draws=%d skip=%d", rng.seed, cfg.start, cfg.draws, cfg.skip
    )
    values = _draw(rng, cfg.draws, cfg.skip)
    return {
        "config": asdict(cfg),
        "state": rng.save_state().as_dict(),
        "draws": values,
    }


def resume_session(
    state: Union[RngState, Dict[str, Any]], draws: int = 10, skip: int = 1
) -> Dict[str, Any]:
    """Continue a saved sequence; the output matches an uninterrupted run."""

    if not isinstance(state, RngState):
        state = RngState.from_dict(state)
    rng = Generator.from_state(state)
    logger.info("resuming at step_count=%d", rng.step_count)
    cfg = SessionConfig(
        seed=state.seed,
        increment=state.increment,
        start=state.step_count,
        draws=draws,
        skip=skip,
    )
    values = _draw(rng, draws, skip)
    return {
        "config": asdict(cfg),
        "state": rng.save_state().as_dict(),
        "draws": values,
    }
