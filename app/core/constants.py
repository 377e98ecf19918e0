"""Application constants."""

# Duration-based exercises (timed holds, cardio) without a reported duration
DEFAULT_DURATION_MINUTES = 1.0

# Session listing
DEFAULT_SESSION_PAGE_SIZE = 50
