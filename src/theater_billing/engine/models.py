"""
Data models for the statement engine.

Uses dataclasses for structured, type-safe data representation.
Input records (Play, Performance, Invoice) are frozen; the Statement
produced from them is assembled once by the builder and then only read.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Play:
    """A play as listed in the play lookup table (keyed by play id)."""
    name: str
    type: str  # "tragedy", "comedy", "history" or "pastoral"


@dataclass(frozen=True)
class Performance:
    """One staging of a play to an audience."""
    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    """A customer's invoice; performance order is the line order of the statement."""
    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable
        object.__setattr__(self, 'performances', tuple(self.performances))


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class Charge:
    """Amount (cents) and volume credits for one performance."""
    play_type: str
    audience: int
    amount: int
    volume_credits: int
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this charge."""
        self.trace.append(TraceStep(step=step, description=description, value=value))


@dataclass
class StatementLine:
    """A single performance line on a statement."""
    play_id: str
    play_name: str
    play_type: str
    audience: int
    amount: int
    volume_credits: int
    trace: list[TraceStep] = field(default_factory=list)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class Statement:
    """Complete result of a statement calculation."""
    customer: str
    lines: list[StatementLine] = field(default_factory=list)
    total_amount: int = 0
    total_volume_credits: int = 0

    def to_dict(self) -> dict:
        """Plain dict form, amounts in cents."""
        return {
            "customer": self.customer,
            "total_amount": self.total_amount,
            "total_volume_credits": self.total_volume_credits,
            "lines": [
                {
                    "play_id": line.play_id,
                    "play_name": line.play_name,
                    "play_type": line.play_type,
                    "audience": line.audience,
                    "amount": line.amount,
                    "volume_credits": line.volume_credits,
                }
                for line in self.lines
            ]
        }
