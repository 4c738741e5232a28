import logging
import time

from ribbon.chain import RibbonChain
from ribbon.config import STROKE, SUSPEND_BREAKPOINT

logger = logging.getLogger(__name__)

ACTIVE = "active"
SUSPENDED = "suspended"


class SimulationDriver:
    """
    Owns the chains and advances them once per scheduled frame.

    The driver is the only writer of the chain list. Outside code reaches a
    chain only through ``perturb(name)``, which edits nothing but the points'
    previous positions.
    """

    def __init__(self, resolve_pairs, viewport_width, surface, style=STROKE,
                 breakpoint=SUSPEND_BREAKPOINT, metrics=None, rng=None, **chain_options):
        self.resolve_pairs = resolve_pairs
        self.viewport_width = viewport_width
        self.surface = surface
        self.style = style
        self.breakpoint = breakpoint
        self.metrics = metrics
        self.rng = rng
        self.chain_options = chain_options
        self.state = None
        self._chains = []

    @property
    def chains(self):
        return tuple(self._chains)

    def chain(self, name):
        for c in self._chains:
            if c.name == name:
                return c
        return None

    def reinit(self):
        """Drop every chain and rebuild from the current anchor pairs."""
        chains = []
        for pair in self.resolve_pairs():
            if not pair.is_complete():
                logger.debug("Skipping ribbon %r: missing anchor", pair.name)
                continue
            chains.append(RibbonChain(pair.start, pair.end, name=pair.name,
                                      rng=self.rng, **self.chain_options))
        self._chains = chains
        logger.info("Initialized %d ribbon(s)", len(chains))

    def _set_state(self, state, width):
        if state != self.state:
            logger.info("Viewport %.0f px: simulation %s", width, state)
            self.state = state

    def tick(self):
        """Advance and draw one frame. Returns the artists drawn."""
        width = self.viewport_width()
        if width <= self.breakpoint:
            self._set_state(SUSPENDED, width)
            return []
        self._set_state(ACTIVE, width)

        # Step every chain before drawing any of them
        for c in self._chains:
            start_time = time.perf_counter()
            c.step()
            if self.metrics is not None:
                self.metrics.record(c.name, time.perf_counter() - start_time,
                                    c.constraint_error())

        self.surface.clear()
        for c in self._chains:
            path = c.render_path()
            if path is not None:
                self.surface.stroke(path, self.style)
        return self.surface.artists()

    def perturb(self, name):
        c = self.chain(name)
        if c is None:
            logger.debug("No ribbon named %r to shake", name)
            return
        c.perturb()
