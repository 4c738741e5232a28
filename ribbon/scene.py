"""
The pin board: cards with pins drawn on a matplotlib figure.

Cards live in figure-fraction coordinates, so they move when the window is
resized and the ribbons have to be rebuilt. Each card has a pin at its top
edge. Pins are the anchors the ribbons hang from.
"""
import logging

from matplotlib import transforms
from matplotlib.patches import Circle, FancyBboxPatch

from ribbon.anchors import AnchorPair, ArtistAnchor

logger = logging.getLogger(__name__)

# card id -> (x, y, width, height) in figure fraction, y up
DEFAULT_LAYOUT = {
    'polaroid': (0.10, 0.52, 0.16, 0.28),
    'main': (0.39, 0.30, 0.24, 0.36),
    'sticky': (0.72, 0.60, 0.14, 0.17),
    'sticky-2': (0.74, 0.14, 0.14, 0.17),
}

CARD_COLORS = {
    'polaroid': '#fdfdfd',
    'main': '#f4f1ea',
    'sticky': '#f9e79f',
    'sticky-2': '#f5b7b1',
}

# ribbon name, start pin, end pin
RIBBON_PAIRS = [
    ('polaroid', 'pin-polaroid', 'pin-main'),
    ('sticky', 'pin-main', 'pin-sticky'),
    ('sticky-2', 'pin-main', 'pin-sticky-2'),
]

PIN_RADIUS = 0.06   # inches
PIN_INSET = 0.025   # figure fraction below the card's top edge


class Board:
    def __init__(self, figure, cards, pins):
        self.figure = figure
        self.cards = cards
        self.pins = pins

    def pin(self, pin_id):
        artist = self.pins.get(pin_id)
        if artist is None:
            return None
        return ArtistAnchor(artist)

    def anchor_pairs(self):
        return [AnchorPair(name, self.pin(start), self.pin(end))
                for name, start, end in RIBBON_PAIRS]

    def card_at(self, event):
        """Id of the topmost card under a mouse event, or None."""
        hit = None
        for card_id, patch in self.cards.items():
            inside, _ = patch.contains(event)
            if inside:
                hit = card_id
        return hit


def build_board(figure, layout=None):
    """Draw the cards and their pins and return the Board."""
    layout = DEFAULT_LAYOUT if layout is None else layout
    cards = {}
    pins = {}

    for card_id, (x, y, w, h) in layout.items():
        card = FancyBboxPatch(
            (x, y), w, h,
            boxstyle="round,pad=0.004",
            transform=figure.transFigure,
            facecolor=CARD_COLORS.get(card_id, 'white'),
            edgecolor='#bbbbbb',
            linewidth=1,
            zorder=1,
            gid=card_id,
        )
        figure.add_artist(card)
        cards[card_id] = card

        # Round pin: radius in inches, centered at a figure-fraction point
        pin_transform = figure.dpi_scale_trans + transforms.ScaledTranslation(
            x + w / 2, y + h - PIN_INSET, figure.transFigure)
        pin = Circle((0, 0), PIN_RADIUS, transform=pin_transform,
                     facecolor='#7b241c', edgecolor='#4a1410', zorder=3,
                     gid=f'pin-{card_id}')
        figure.add_artist(pin)
        pins[f'pin-{card_id}'] = pin

    logger.debug("Board built with cards %s", list(cards))
    return Board(figure, cards, pins)


class TriggerRouter:
    """Shakes a card's ribbon when the card is clicked or the pointer enters it."""

    def __init__(self, board, driver):
        self.board = board
        self.driver = driver
        self.hovered = None
        canvas = board.figure.canvas
        self.cids = [
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('motion_notify_event', self.on_motion),
            canvas.mpl_connect('figure_leave_event', self.on_leave),
        ]

    def on_press(self, event):
        card_id = self.board.card_at(event)
        if card_id is not None:
            self.driver.perturb(card_id)

    def on_motion(self, event):
        card_id = self.board.card_at(event)
        if card_id != self.hovered and card_id is not None:
            self.driver.perturb(card_id)
        self.hovered = card_id

    def on_leave(self, event):
        # Re-entering onto the same card counts as a new enter
        self.hovered = None

    def disconnect(self):
        for cid in self.cids:
            self.board.figure.canvas.mpl_disconnect(cid)
        self.cids = []
