from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class InvalidArgument(ValueError):
    """Raised when a pricing input violates its domain constraint.

    ``field`` holds the name of the offending input (``"S"``, ``"K"``,
    ``"sigma"``, ``"T"`` or ``"kind"``).
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class OptionType(str, Enum):
    """European option type.  Values compare equal to ``"call"`` / ``"put"``."""

    CALL = "call"
    PUT = "put"

    @classmethod
    def coerce(cls, kind: OptionType | str) -> OptionType:
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise InvalidArgument(
                "kind", f"kind must be 'call' or 'put', got {kind!r}"
            ) from None


CALL = OptionType.CALL
PUT  = OptionType.PUT


def validate(S: float, K: float, sigma: float, T: float) -> None:
    """Gate run before every price / Greek evaluation.

    Comparisons are negated so that NaN inputs are rejected as well.
    """
    if not S > 0.0:
        raise InvalidArgument("S", "Spot price S must be > 0")
    if not K > 0.0:
        raise InvalidArgument("K", "Strike price K must be > 0")
    if not sigma >= 0.0:
        raise InvalidArgument("sigma", "Volatility sigma must be >= 0")
    if not T >= 0.0:
        raise InvalidArgument("T", "Time to maturity T must be >= 0")


@dataclass(frozen=True)
class OptionSpec:
    """Single-option container bundling contract + market inputs.

    Parameters
    ----------
    S : float
        Spot price of the underlying.
    K : float
        Strike price.
    r : float
        Continuously-compounded risk-free rate.
    sigma : float
        Annualised volatility (``0`` allowed).
    T : float
        Time to maturity in years (``0`` means at expiry).
    kind : OptionType
        ``CALL`` (default) or ``PUT``; plain strings are coerced.
    """
    S: float
    K: float
    r: float
    sigma: float
    T: float          # years
    kind: OptionType = CALL

    def __post_init__(self):
        validate(self.S, self.K, self.sigma, self.T)
        object.__setattr__(self, "kind", OptionType.coerce(self.kind))
