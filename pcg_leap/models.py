from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Iterable, Tuple

from .wide import join_u64, split_u64, to_uint64

# Multiplier from L'Ecuyer's tables of good LCG multipliers (Math. Comp. 68, 1999).
MULTIPLIER = 0x27BB2EE687B0B0FD
DEFAULT_INCREMENT = 0x14057B7EF767814F
DEFAULT_SEED = 0x000FA47200F02386


@dataclass(frozen=True)
class RngState:
    """Everything needed to put a generator back at an exact position.

    The multiplier is an engine constant and is not part of the bundle.
    """

    seed: int
    step_count: int = 0
    increment: int = DEFAULT_INCREMENT

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, to_uint64(getattr(self, f.name)))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.seed, self.step_count, self.increment)

    @classmethod
    def from_tuple(cls, values: Iterable[int]) -> "RngState":
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(
                f"Expected (seed, step_count, increment), received {len(values)} values."
            )
        return cls(*values)

    def to_halves(self) -> Tuple[int, int, int, int, int, int]:
        """Six 32-bit words, low half first for each field."""
        return (
            *split_u64(self.seed),
            *split_u64(self.step_count),
            *split_u64(self.increment),
        )

    @classmethod
    def from_halves(cls, values: Iterable[int]) -> "RngState":
        words = tuple(values)
        if len(words) != 6:
            raise ValueError(f"Expected six 32-bit words, received {len(words)}.")
        return cls(
            seed=join_u64(words[0], words[1]),
            step_count=join_u64(words[2], words[3]),
            increment=join_u64(words[4], words[5]),
        )

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "RngState":
        missing = [f.name for f in fields(cls) if f.name not in payload]
        if missing:
            raise ValueError(f"State payload is missing keys: {', '.join(missing)}")
        try:
            return cls(**{f.name: int(payload[f.name]) for f in fields(cls)})
        except (TypeError, ValueError) as exc:
            raise ValueError("State payload fields must be integers.") from exc
