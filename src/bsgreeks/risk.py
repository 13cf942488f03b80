"""Bump-and-reprice Greeks.

Central finite differences over any scalar pricer with the
``pricer(kind, S, K, r, sigma, T) -> float`` signature.  Used to cross-check
the closed-form sensitivities in ``black_scholes``.
"""

from __future__ import annotations

from typing import Callable

from .core import OptionType, validate

__all__ = ["numerical_greeks"]

ONE_DAY = 1.0 / 365.0


def numerical_greeks(
    pricer_func: Callable[..., float],
    kind: OptionType | str,
    S: float,
    K: float,
    r: float,
    sigma: float,
    T: float,
    *,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via central finite differences on an arbitrary pricer.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(kind, S, K, r, sigma, T) -> float``.
    kind : OptionType or str
        ``"call"`` or ``"put"``.
    S, K, r, sigma, T : float
        Market and contract inputs.
    bump_pct : float
        Relative bump size for spot and vol; absolute for rate (default 0.01).

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
        Theta is the one-day forward difference scaled to per-year units,
        and ``0.0`` when less than a day remains.
    """
    validate(S, K, sigma, T)
    kind = OptionType.coerce(kind)
    P0 = pricer_func(kind, S, K, r, sigma, T)

    # --- Delta & Gamma (spot bump) ---
    eps_S = bump_pct * S
    P_up = pricer_func(kind, S + eps_S, K, r, sigma, T)
    P_dn = pricer_func(kind, S - eps_S, K, r, sigma, T)
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump, floored at zero vol) ---
    eps_v = max(bump_pct * sigma, 1e-4)
    sig_dn = max(sigma - eps_v, 0.0)
    P_vup = pricer_func(kind, S, K, r, sigma + eps_v, T)
    P_vdn = pricer_func(kind, S, K, r, sig_dn, T)
    vega = (P_vup - P_vdn) / (sigma + eps_v - sig_dn)

    # --- Theta (time decay, 1-day bump) ---
    if T > ONE_DAY:
        P_t = pricer_func(kind, S, K, r, sigma, T - ONE_DAY)
        theta_val = (P_t - P0) / ONE_DAY
    else:
        theta_val = 0.0

    # --- Rho (rate bump) ---
    eps_r = bump_pct
    P_rup = pricer_func(kind, S, K, r + eps_r, sigma, T)
    P_rdn = pricer_func(kind, S, K, r - eps_r, sigma, T)
    rho = (P_rup - P_rdn) / (2.0 * eps_r)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega),
        "theta": float(theta_val),
        "rho": float(rho),
    }
