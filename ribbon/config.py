from dataclasses import dataclass

# --- Physics ---
GRAVITY = 0.4               # downward acceleration per step^2 (screen y grows down)
FRICTION = 0.9              # damping on implicit velocity
SEGMENTS = 20               # constraints per chain, points = SEGMENTS + 1
SLACK = 0.7                 # total rest length / anchor distance
RELAX_ITERATIONS = 5        # relaxation passes per frame

# --- Shake ---
IMPULSE_PROBABILITY = 0.5   # chance an interior point gets kicked
IMPULSE_BASE = 5.0
IMPULSE_SPREAD = 10.0

# --- Scheduling ---
SUSPEND_BREAKPOINT = 768    # px, ticks are skipped at or below this width
FRAME_INTERVAL_MS = 16


@dataclass(frozen=True)
class StrokeStyle:
    color: str = "#c0392b"
    width: float = 3.0                      # px
    capstyle: str = "round"
    joinstyle: str = "round"
    shadow_color: tuple = (0.0, 0.0, 0.0)
    shadow_alpha: float = 0.2
    shadow_blur: float = 3.0                # px
    shadow_offset: tuple = (2.0, 2.0)       # px, screen coordinates


STROKE = StrokeStyle()
