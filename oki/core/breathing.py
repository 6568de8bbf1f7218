import math

INHALE_SECONDS = 4.0
EXHALE_SECONDS = 4.0
MIN_SCALE = 1.0
MAX_SCALE = 1.3

# Sine ease-in-out over [0, 1].
def ease_in_out(t):
    t = min(1.0, max(0.0, t))
    return 0.5 - 0.5 * math.cos(math.pi * t)

# Position within the current breath, as (phase, progress through that phase).
def _breath_position(elapsed):
    elapsed = max(0.0, float(elapsed))
    offset = elapsed % (INHALE_SECONDS + EXHALE_SECONDS)
    if offset < INHALE_SECONDS:
        return "inhale", offset / INHALE_SECONDS
    return "exhale", (offset - INHALE_SECONDS) / EXHALE_SECONDS

def breathing_phase(elapsed):
    return _breath_position(elapsed)[0]

# Circle scale after `elapsed` seconds: grows from MIN_SCALE to MAX_SCALE while inhaling and shrinks back exhaling.
def breathing_scale(elapsed):
    phase, progress = _breath_position(elapsed)
    eased = ease_in_out(progress)
    if phase == "exhale":
        eased = 1.0 - eased
    return MIN_SCALE + (MAX_SCALE - MIN_SCALE) * eased
