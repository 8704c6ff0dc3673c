#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List

from arith import Algorithm, compute_gcd, lcm, MAX_UINT_64
from arith.bench import benchmark, random_pairs, DEFAULT_ALGORITHMS

logger = logging.getLogger(__name__)


def parse_operand(inp: str) -> int:
    try:
        val = int(inp, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {inp!r}")

    if not 0 <= val <= MAX_UINT_64:
        raise argparse.ArgumentTypeError(f"{inp} is not an unsigned 64-bit integer")

    return val


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="arith",
        description="Greatest common divisor and least common multiple of unsigned 64-bit integers.",
    )

    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument("--no-jit", action="store_true",
                               help="Do not use JIT compilation. The pure python implementation gives the same "
                                    "results, but is significantly slower.")
    common_parser.add_argument("-v", "--verbose", action="store_true", default=False,
                               help="Set this flag to enable verbose logging.")
    common_parser.add_argument("-vv", "--very-verbose", action="store_true", default=False,
                               help="Set this flag to enable very verbose logging.")

    algorithm_names = [a.value for a in Algorithm]

    subparsers = parser.add_subparsers(title="command", required=True, dest="command")

    gcd_parser = subparsers.add_parser("gcd", parents=[common_parser],
                                       help="Compute the greatest common divisor of two integers.")
    gcd_parser.add_argument("a", type=parse_operand,
                            help="The first operand. Prefixes 0x and 0b are accepted.")
    gcd_parser.add_argument("b", type=parse_operand,
                            help="The second operand. Prefixes 0x and 0b are accepted.")
    gcd_parser.add_argument("-a", "--algorithm", type=str, choices=algorithm_names, default=Algorithm.DEFAULT.value,
                            help="The algorithm to use. The operands may be given in any order for all of them.")

    lcm_parser = subparsers.add_parser("lcm", parents=[common_parser],
                                       help="Compute the least common multiple of two integers. "
                                            "Fails if the result does not fit into 64 bits.")
    lcm_parser.add_argument("a", type=parse_operand,
                            help="The first operand. Prefixes 0x and 0b are accepted.")
    lcm_parser.add_argument("b", type=parse_operand,
                            help="The second operand. Prefixes 0x and 0b are accepted.")

    bench_parser = subparsers.add_parser("bench", parents=[common_parser],
                                         help="Compare the running time of the GCD algorithms on random operands.")
    bench_parser.add_argument("-n", "--pairs", type=int, default=100_000, metavar="N",
                              help="The number of random pairs of operands.")
    bench_parser.add_argument("--seed", type=int, default=0,
                              help="The seed of the random number generator.")
    bench_parser.add_argument("--bits", type=int, default=64, choices=range(1, 65), metavar="[1-64]",
                              help="The maximum number of bits of the operands. "
                                   "Use a small value when benchmarking the subtractive algorithm, "
                                   "whose running time is linear in the value of the operands.")
    bench_parser.add_argument("-a", "--algorithm", type=str, choices=algorithm_names, action="append",
                              help="An algorithm to benchmark. Can be repeated. "
                                   "By default, all algorithms except euclid are benchmarked.")

    args = parser.parse_args(argv)

    # Set up logging
    logging.basicConfig(
        level=logging.DEBUG if args.very_verbose else logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s")

    # Disable numba debug logging
    if args.very_verbose and not args.no_jit:
        numba_logger = logging.getLogger('numba')
        numba_logger.setLevel(logging.INFO)

    if args.command == "gcd":
        algorithm = Algorithm(args.algorithm)
        logger.info("Algorithm: %s", algorithm.value)
        print(compute_gcd(algorithm, args.a, args.b, no_jit=args.no_jit))
        return 0

    if args.command == "lcm":
        try:
            print(lcm(args.a, args.b, no_jit=args.no_jit))
        except OverflowError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0

    assert args.command == "bench"

    if args.algorithm:
        algorithms = [Algorithm(name) for name in args.algorithm]
    else:
        algorithms = DEFAULT_ALGORITHMS
    if Algorithm.EUCLID in algorithms and args.bits > 20:
        logger.warning("The subtractive algorithm may take very long on %s-bit operands.", args.bits)

    logger.info("Pairs: %s", args.pairs)
    logger.info("Seed: %s", args.seed)
    logger.info("Bits: %s", args.bits)

    pairs = random_pairs(args.pairs, seed=args.seed, bits=args.bits)
    timings = benchmark(algorithms, pairs, no_jit=args.no_jit)

    for algorithm, seconds in timings.items():
        print(f"{algorithm.value:>16}: {seconds:.6f} s")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
