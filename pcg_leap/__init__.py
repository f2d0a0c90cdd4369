"""Public package surface for the pcg-leap jump-ahead generator."""

from .generator import Generator, jump_transform, xsh_rr
from .models import DEFAULT_INCREMENT, DEFAULT_SEED, MULTIPLIER, RngState
from .session import SessionConfig, resume_session, run_session

__all__ = [
    "DEFAULT_INCREMENT",
    "DEFAULT_SEED",
    "Generator",
    "MULTIPLIER",
    "RngState",
    "SessionConfig",
    "jump_transform",
    "resume_session",
    "run_session",
    "xsh_rr",
]
