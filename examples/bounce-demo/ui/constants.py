"""Window layout, timing, and status bar colors."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 960
SCREEN_H = 540
STATUS_H = 64
MIN_W = 200
MIN_H = STATUS_H + 80

# Status bar
STATUS_BG = (240, 244, 248)
STATUS_BORDER = (210, 214, 220)
TEXT_COLOR = (51, 51, 51)
LABEL_COLOR = (85, 85, 85)
TEXT_DIM = (150, 150, 160)
ACTIVE_COLOR = (74, 144, 226)
EXPIRED_COLOR = (226, 74, 74)

HELP_TEXT = (
    "Space play/pause  R reset  ←/→ speed  ↑/↓ size  "
    "+/- duration  J jitter  S sound  C/B colors  Esc quit"
)
