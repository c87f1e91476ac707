"""
Domain Models for the Theater Statement Engine

These dataclasses provide type-safe representations of all billing entities.
All monetary values are integers in minor currency units (cents).
"""

from dataclasses import dataclass, field, fields
from enum import Enum

from .errors import UnknownPlayError, UnknownPlayTypeError

# =============================================================================
# INPUT MODELS
# =============================================================================


class PlayType(Enum):
    """Closed set of genres the pricing rules know about."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value) -> "PlayType":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownPlayTypeError(str(value))


@dataclass(frozen=True)
class Play:
    """A play that can be performed."""

    name: str
    type: PlayType

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", PlayType.parse(self.type))

    @classmethod
    def from_dict(cls, data: dict) -> "Play":
        return cls(name=_require(data, "name"), type=_require(data, "type"))


@dataclass(frozen=True)
class Performance:
    """A single performance of a play on an invoice."""

    play_id: str
    audience: int

    @classmethod
    def from_dict(cls, data: dict) -> "Performance":
        return cls(play_id=_require(data, "playID"), audience=_require(data, "audience"))


@dataclass(frozen=True)
class Invoice:
    """A customer's invoice: an ordered list of performances."""

    customer: str
    performances: tuple[Performance, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Invoice":
        customer = _require(data, "customer")
        performances = data.get("performances", [])
        if not isinstance(performances, list):
            raise ValueError("performances must be a list")
        return cls(customer=customer, performances=tuple(Performance.from_dict(p) for p in performances))


@dataclass(frozen=True)
class PlayCatalog:
    """Read-only mapping from playID to Play."""

    plays: dict[str, Play] = field(default_factory=dict)

    def lookup(self, play_id: str) -> Play:
        try:
            return self.plays[play_id]
        except KeyError:
            raise UnknownPlayError(play_id) from None

    def __contains__(self, play_id: str) -> bool:
        return play_id in self.plays

    def __len__(self) -> int:
        return len(self.plays)

    @classmethod
    def from_dict(cls, data: dict) -> "PlayCatalog":
        if not isinstance(data, dict):
            raise ValueError(f"plays must be an object keyed by playID, got: {type(data).__name__}")
        return cls(plays={play_id: Play.from_dict(play) for play_id, play in data.items()})


@dataclass(frozen=True)
class PricingRules:
    """Pricing and volume-credit constants, in cents where monetary."""

    tragedy_base_amount: int = 40000
    # Used both as the "audience exceeds" comparison and as the subtraction.
    tragedy_audience_threshold: int = 30
    tragedy_amount_per_extra_seat: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5

    @classmethod
    def from_dict(cls, data: dict | None) -> "PricingRules":
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"rules must be an object, got: {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown pricing rules: {', '.join(sorted(unknown))}")
        return cls(**data)


@dataclass(frozen=True)
class StatementInput:
    """Complete input for producing a statement."""

    invoice: Invoice
    catalog: PlayCatalog
    rules: PricingRules = field(default_factory=PricingRules)

    @classmethod
    def from_dict(cls, data: dict) -> "StatementInput":
        return cls(
            invoice=Invoice.from_dict(_require(data, "invoice")),
            catalog=PlayCatalog.from_dict(_require(data, "plays")),
            rules=PricingRules.from_dict(data.get("rules")),
        )


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class PerformanceLine:
    """Computed charge for one performance."""

    play_id: str
    play_name: str
    amount: int
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class StatementResult:
    """Final output of statement calculation."""

    customer: str
    lines: tuple[PerformanceLine, ...]
    total_amount: int
    total_volume_credits: int


def _require(data: dict, key: str):
    if not isinstance(data, dict):
        raise ValueError(f"Expected an object containing {key}, got: {type(data).__name__}")
    if key not in data:
        raise ValueError(f"Missing required field: {key}")
    return data[key]
