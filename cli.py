# cli.py

from argparse import ArgumentParser

from engine import PagingSimulator
from report import build_report
from utils import parse_seed

parser = ArgumentParser(
    prog="paging-sim",
    description="Fill a paged memory with random processes, first fit, and report the layout.",
)
parser.add_argument(
    "seed",
    nargs="?",
    help="integer seed for the process-size stream; defaults to the current time",
)
parser.add_argument(
    "--show-seed", action="store_true", help="print the seed used before the report"
)
parser.add_argument(
    "--verbose", action="store_true", help="print the allocation event log after the report"
)


def main(argv=None):
    # Only a single seed argument is honoured; extras (e.g. "5 6" or "-abc")
    # make the whole seed invalid
    args, extra = parser.parse_known_args(argv)
    raw_seed = None if extra else args.seed

    # A malformed seed is replaced, not reported
    seed = parse_seed(raw_seed)

    sim = PagingSimulator(seed)
    sim.run()

    if args.show_seed:
        print(f"Seed: {seed}\n")
    print(build_report(sim), end="")
    if args.verbose:
        print("\nEvent log:")
        for ev in sim.event_log:
            print(ev)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
