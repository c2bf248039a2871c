import argparse

# ======================================================================================
# Command-line overrides
# ======================================================================================
# Unknown arguments are left for the input script.

parser = argparse.ArgumentParser(
    description="DEXCITE: nuclear de-excitation events", allow_abbrev=False
)
parser.add_argument("--N_event", help="number of events", type=int)
parser.add_argument("--rng_seed", help="random number generator seed", type=int)
parser.add_argument("--output", type=str, help="output file name")
parser.add_argument("--progress_bar", default=None, action="store_true")
parser.add_argument("--no-progress_bar", dest="progress_bar", action="store_false")
parser.add_argument(
    "--hepevt", default=None, action="store_true", help="also write HEPEvt output"
)
args, unargs = parser.parse_known_args()


def apply(settings, args=args):
    """Override `settings` with whatever was given on the command line."""
    if args.N_event is not None:
        settings.N_event = args.N_event
    if args.rng_seed is not None:
        settings.rng_seed = args.rng_seed
    if args.output is not None:
        settings.output_name = args.output
    if args.progress_bar is not None:
        settings.use_progress_bar = args.progress_bar
    if args.hepevt is not None:
        settings.save_hepevt = args.hepevt
