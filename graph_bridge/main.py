from __future__ import annotations

import argparse
import logging
from typing import Sequence

from graph_bridge import __version__
from graph_bridge.config import DemoConfig
from graph_bridge.drawing import draw
from graph_bridge.graph import GraphBackend, with_dots_count
from graph_bridge.rendering import DrawBackend


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-bridge",
        description="Draw a small demo graph with a selectable storage and GUI backend.",
    )

    parser.add_argument(
        '--graph-backend', '-g',
        required=True,
        type=GraphBackend,
        choices=list(GraphBackend),
        metavar="{" + ",".join(b.value for b in GraphBackend) + "}",
        help='Graph storage variant'
    )

    parser.add_argument(
        '--draw-backend', '-d',
        required=True,
        type=DrawBackend,
        choices=list(DrawBackend),
        metavar="{" + ",".join(b.value for b in DrawBackend) + "}",
        help='GUI toolkit used to show the graph'
    )

    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Build the demo graph and show it until the window is closed.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    demo = DemoConfig()
    graph = with_dots_count(args.graph_backend, demo.dots_count)
    for (from_dot, to_dot) in demo.edges:
        graph.add_edge(from_dot, to_dot)

    draw(graph, args.draw_backend)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
