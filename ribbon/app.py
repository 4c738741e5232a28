import argparse
import logging

import matplotlib.animation as animation
import matplotlib.pyplot as plt

from ribbon.config import FRAME_INTERVAL_MS, SUSPEND_BREAKPOINT
from ribbon.driver import SimulationDriver
from ribbon.logging_config import setup_logging
from ribbon.metrics import FrameMetrics
from ribbon.scene import TriggerRouter, build_board
from ribbon.surface import MatplotlibSurface

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="ribbon", description="Swinging ribbons between pinned cards.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--stats", action="store_true",
                        help="print per-ribbon timing and constraint error on exit")
    return parser.parse_args(argv)


def build_app(fig, metrics=None):
    """Wire surface, board, driver and triggers onto a figure."""
    surface = MatplotlibSurface(fig)
    board = build_board(fig)
    driver = SimulationDriver(board.anchor_pairs, lambda: surface.width, surface,
                              metrics=metrics)
    router = TriggerRouter(board, driver)

    def on_resize(event):
        width, height = surface.size()
        logger.debug("Window resized to %.0fx%.0f px, rebuilding ribbons", width, height)
        surface.resize(width, height)
        # Ribbons drawn for the old size would sit in the wrong place
        surface.clear()
        driver.reinit()

    fig.canvas.mpl_connect('resize_event', on_resize)
    driver.reinit()
    return driver, router


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    metrics = FrameMetrics() if args.stats else None

    fig = plt.figure(figsize=(12, 7))
    fig.patch.set_facecolor('#c8a97e')
    fig.canvas.manager.set_window_title('Ribbons')
    driver, router = build_app(fig, metrics=metrics)

    def update(frame):
        return driver.tick()

    if metrics is not None:
        def on_close(event):
            print("\n" + "=" * 80)
            print("Ribbon Performance Summary")
            print("=" * 80)
            print(metrics.format_summary())
        fig.canvas.mpl_connect('close_event', on_close)

    print("Ribbons between pinned cards")
    print("=" * 40)
    print("Click or hover a card to shake its ribbon")
    print("Resize the window to rebuild the ribbons")
    print(f"Simulation pauses when the window is {SUSPEND_BREAKPOINT} px wide or less")

    ani = animation.FuncAnimation(fig, update, interval=FRAME_INTERVAL_MS,
                                  blit=False, cache_frame_data=False)
    plt.show()
    return ani
