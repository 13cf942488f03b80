"""Closed-form Black-Scholes price and Greeks for European options.

All functions take scalar inputs in the order ``(kind, S, K, r, sigma, T)``
and return a plain ``float``.  Inputs are validated on every call; the
boundary of the domain is handled by explicit branches:

* ``T == 0``  -- the option is at expiry, values follow the payoff.
* ``sigma == 0, T > 0`` -- deterministic forward, values follow the
  discounted payoff (its sensitivities are the zero-vol limits).

Vega is dPrice/dSigma (absolute), theta is dPrice/dt per year and rho is
dPrice/dr (absolute).
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

from scipy.special import erf

from .core import CALL, OptionSpec, OptionType, validate

__all__ = [
    "INV_SQRT_2", "INV_SQRT_2PI",
    "norm_cdf", "norm_pdf",
    "D1D2", "d1_d2",
    "price", "delta", "gamma", "vega", "theta", "rho",
    "greeks", "greeks_for",
]

log = logging.getLogger(__name__)

INV_SQRT_2 = 0.70710678118654752440    # 1 / sqrt(2)
INV_SQRT_2PI = 0.3989422804014327      # 1 / sqrt(2*pi)


# ---------------------------------------------------------------------------
# Standard normal helpers
# ---------------------------------------------------------------------------
def norm_cdf(x: float) -> float:
    """Standard normal CDF, ``0.5 * (1 + erf(x / sqrt(2)))``."""
    return float(0.5 * (1.0 + erf(x * INV_SQRT_2)))


def norm_pdf(x: float) -> float:
    """Standard normal density."""
    return INV_SQRT_2PI * math.exp(-0.5 * x * x)


# ---------------------------------------------------------------------------
# d1 / d2
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class D1D2:
    d1: float
    d2: float


def d1_d2(S: float, K: float, r: float, sigma: float, T: float) -> Optional[D1D2]:
    """Return ``D1D2`` or ``None`` in the degenerate regime (``T <= 0`` or ``sigma == 0``)."""
    if T <= 0.0 or sigma == 0.0:
        return None
    sig_sqrt_T = sigma * math.sqrt(T)
    d1 = (math.log(S) - math.log(K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    return D1D2(d1, d1 - sig_sqrt_T)


def _forward_weight(S: float, K: float, r: float, T: float) -> float:
    """Zero-vol limit of N(d1) and N(d2): 1 in, 0 out of the money-forward, 0.5 at it."""
    m = math.log(S) - math.log(K) + r * T
    if m > 0.0:
        return 1.0
    if m < 0.0:
        return 0.0
    return 0.5


def _discount(r: float, T: float) -> float:
    """``exp(-rT)``, saturating to ``inf`` for very negative rates."""
    try:
        return math.exp(-r * T)
    except OverflowError:
        return math.inf


def _pv_strike(K: float, disc_r: float, weight: float) -> float:
    """``K * exp(-rT) * weight`` with a zero weight winning over an infinite discount."""
    if weight == 0.0:
        return 0.0
    return K * disc_r * weight


def _log_zero_vol(what: str, S, K, r, T):
    log.debug("%s: sigma == 0 with T=%g, using zero-vol limit (S=%g, K=%g, r=%g)",
              what, T, S, K, r)


# ---------------------------------------------------------------------------
# Price
# ---------------------------------------------------------------------------
def price(kind: OptionType | str, S: float, K: float, r: float,
          sigma: float, T: float) -> float:
    """Black-Scholes price of a European call or put."""
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)

    if T == 0.0:
        return float(max(0.0, S - K) if kind == CALL else max(0.0, K - S))

    d = d1_d2(S, K, r, sigma, T)
    disc_r = _discount(r, T)
    if d is None:
        _log_zero_vol(f"{kind.value} price", S, K, r, T)
        if kind == CALL:
            return float(max(0.0, S - K * disc_r))
        return float(max(0.0, K * disc_r - S))

    if kind == CALL:
        return S * norm_cdf(d.d1) - _pv_strike(K, disc_r, norm_cdf(d.d2))
    return _pv_strike(K, disc_r, norm_cdf(-d.d2)) - S * norm_cdf(-d.d1)


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
def delta(kind: OptionType | str, S: float, K: float, r: float,
          sigma: float, T: float) -> float:
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)

    if T == 0.0:
        if kind == CALL:
            return 1.0 if S > K else 0.0
        return -1.0 if S < K else 0.0

    d = d1_d2(S, K, r, sigma, T)
    if d is None:
        _log_zero_vol(f"{kind.value} delta", S, K, r, T)
        N_d1 = _forward_weight(S, K, r, T)
    else:
        N_d1 = norm_cdf(d.d1)
    return N_d1 if kind == CALL else N_d1 - 1.0


def gamma(S: float, K: float, r: float, sigma: float, T: float) -> float:
    """Same for calls and puts.  Zero at expiry and at zero vol."""
    validate(S, K, sigma, T)
    if T == 0.0:
        return 0.0
    d = d1_d2(S, K, r, sigma, T)
    if d is None:
        _log_zero_vol("gamma", S, K, r, T)
        return 0.0
    return norm_pdf(d.d1) / (S * sigma * math.sqrt(T))


def vega(S: float, K: float, r: float, sigma: float, T: float) -> float:
    """Same for calls and puts.

    At zero vol the limit is ``S * n(0) * sqrt(T)`` exactly at the money-forward
    and zero elsewhere.
    """
    validate(S, K, sigma, T)
    if T == 0.0:
        return 0.0
    d = d1_d2(S, K, r, sigma, T)
    if d is None:
        _log_zero_vol("vega", S, K, r, T)
        if _forward_weight(S, K, r, T) == 0.5:
            return S * INV_SQRT_2PI * math.sqrt(T)
        return 0.0
    return S * norm_pdf(d.d1) * math.sqrt(T)


def theta(kind: OptionType | str, S: float, K: float, r: float,
          sigma: float, T: float) -> float:
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)
    if T == 0.0:
        return 0.0

    disc_r = _discount(r, T)
    d = d1_d2(S, K, r, sigma, T)
    if d is None:
        _log_zero_vol(f"{kind.value} theta", S, K, r, T)
        w = _forward_weight(S, K, r, T)
        if kind == CALL:
            return -r * _pv_strike(K, disc_r, w)
        return r * _pv_strike(K, disc_r, 1.0 - w)

    decay = -(S * norm_pdf(d.d1) * sigma) / (2.0 * math.sqrt(T))
    if kind == CALL:
        return decay - r * _pv_strike(K, disc_r, norm_cdf(d.d2))
    return decay + r * _pv_strike(K, disc_r, norm_cdf(-d.d2))


def rho(kind: OptionType | str, S: float, K: float, r: float,
        sigma: float, T: float) -> float:
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)
    if T == 0.0:
        return 0.0

    disc_r = _discount(r, T)
    d = d1_d2(S, K, r, sigma, T)
    if d is None:
        _log_zero_vol(f"{kind.value} rho", S, K, r, T)
        w = _forward_weight(S, K, r, T)
        N_d2, N_minus_d2 = w, 1.0 - w
    else:
        N_d2, N_minus_d2 = norm_cdf(d.d2), norm_cdf(-d.d2)

    if kind == CALL:
        return T * _pv_strike(K, disc_r, N_d2)
    return -T * _pv_strike(K, disc_r, N_minus_d2)


def greeks(kind: OptionType | str, S: float, K: float, r: float,
           sigma: float, T: float) -> Dict[str, float]:
    """Price and all five Greeks in one dict.

    Keys: ``price``, ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
    """
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)
    return {
        "price": price(kind, S, K, r, sigma, T),
        "delta": delta(kind, S, K, r, sigma, T),
        "gamma": gamma(S, K, r, sigma, T),
        "vega":  vega(S, K, r, sigma, T),
        "theta": theta(kind, S, K, r, sigma, T),
        "rho":   rho(kind, S, K, r, sigma, T),
    }


def greeks_for(opt: OptionSpec) -> Dict[str, float]:
    """``greeks`` on a bundled ``OptionSpec``."""
    return greeks(opt.kind, opt.S, opt.K, opt.r, opt.sigma, opt.T)
