import argparse
import logging
import sys

from gatesim.config import CIRCUIT_CONFIG, RENDER_CONFIG
from .session import Session


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Define a combinational logic circuit and simulate it interactively.")
    parser.add_argument('--name', metavar='NAME', type=str,
                        help='Circuit name, used for the DOT file. Asked interactively if omitted.')
    parser.add_argument('-o', '--output-dir', metavar='DIR', type=str,
                        default=RENDER_CONFIG["output_dir"],
                        help='Directory for the DOT file and the rendered diagram.')
    parser.add_argument('--no-render', action='store_true',
                        help='Write the DOT file but do not invoke Graphviz.')
    parser.add_argument('--strict', action='store_true', default=CIRCUIT_CONFIG["strict"],
                        help='Reject simulations that read a net with no value instead of reading 0.')
    parser.add_argument('--check-order', action='store_true', default=CIRCUIT_CONFIG["check_order"],
                        help='Warn about gates that read nets not defined by an earlier gate.')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (more verbose logging).')
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(format='%(module)16s %(levelname)8s: %(message)s', level=log_level)

    session = Session(output_dir=args.output_dir, render=not args.no_render,
                      strict=args.strict, order_check=args.check_order, name=args.name)
    return session.run()


if __name__ == "__main__":
    sys.exit(main())
