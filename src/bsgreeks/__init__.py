# bsgreeks - Black-Scholes price & Greeks for European options
# Public API

from .core import OptionType, OptionSpec, InvalidArgument, validate, CALL, PUT
from .black_scholes import (
    norm_cdf, norm_pdf, D1D2, d1_d2,
    price, delta, gamma, vega, theta, rho,
    greeks, greeks_for,
)

# Bump-and-reprice cross-check
from .risk import numerical_greeks

__all__ = [
    # Data model
    "OptionType", "OptionSpec", "InvalidArgument", "validate", "CALL", "PUT",
    # Normal distribution
    "norm_cdf", "norm_pdf",
    # Closed form
    "D1D2", "d1_d2",
    "price", "delta", "gamma", "vega", "theta", "rho",
    "greeks", "greeks_for",
    # Risk
    "numerical_greeks",
]

__version__ = "0.1.0"
