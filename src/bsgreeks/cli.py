import argparse
import logging
import sys
from typing import List, Optional

from .core import InvalidArgument, OptionType
from .black_scholes import greeks, price

log = logging.getLogger(__name__)

USAGE = ("Usage: bsgreeks --type <call|put> --S <spot> --K <strike> --r <rate> "
         "--sigma <vol> --T <time> [--greeks] [-v]")

GREEK_LABELS = (("delta", "Delta"), ("gamma", "Gamma"), ("vega", "Vega"),
                ("theta", "Theta"), ("rho", "Rho"))

VALUE_FLAGS = ("--type", "--S", "--K", "--r", "--sigma", "--T")


def join_values(argv: List[str]) -> List[str]:
    """Rewrite ``--flag value`` as ``--flag=value`` for the value flags.

    argparse would otherwise read a value such as ``-1e-3`` as an option.
    """
    out = []
    i = 0
    while i < len(argv):
        a = argv[i]
        if a in VALUE_FLAGS and i + 1 < len(argv):
            out.append(f"{a}={argv[i + 1]}")
            i += 2
        else:
            out.append(a)
            i += 1
    return out


def build_parser() -> argparse.ArgumentParser:
    # Defaults for S, K, sigma and T are invalid on purpose: unset inputs fail validation.
    p = argparse.ArgumentParser(prog="bsgreeks", add_help=False, allow_abbrev=False,
                                description="Black-Scholes price and Greeks")
    p.add_argument("--type", dest="kind", default=OptionType.CALL.value, help="call|put")
    p.add_argument("--S", type=float, default=-1.0, help="spot")
    p.add_argument("--K", type=float, default=-1.0, help="strike")
    p.add_argument("--r", type=float, default=0.0, help="cont. risk-free")
    p.add_argument("--sigma", type=float, default=-1.0, help="volatility")
    p.add_argument("--T", type=float, default=-1.0, help="years")
    p.add_argument("--greeks", action="store_true", help="also print delta, gamma, vega, theta, rho")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE)
        return 0

    argv = join_values(argv)
    # Flags are honoured in order: a bad --type fails before a later --help.
    for a in argv:
        if a == "--help":
            print(USAGE)
            return 0
        if a.startswith("--type="):
            value = a.split("=", 1)[1]
            if value not in ("call", "put"):
                print(f"Unknown type: {value}", file=sys.stderr)
                return 1

    args, unknown = build_parser().parse_known_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if unknown:
        log.debug("ignoring unrecognised arguments: %s", " ".join(unknown))

    kind = OptionType(args.kind)

    log.debug("pricing %s S=%g K=%g r=%g sigma=%g T=%g",
              kind.value, args.S, args.K, args.r, args.sigma, args.T)
    try:
        if args.greeks:
            g = greeks(kind, args.S, args.K, args.r, args.sigma, args.T)
            px = g["price"]
        else:
            px = price(kind, args.S, args.K, args.r, args.sigma, args.T)
    except InvalidArgument as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Price: {px:.6f}")
    if args.greeks:
        for key, label in GREEK_LABELS:
            print(f"{label}: {g[key]:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
