"""
Down GAA Camogie Color Palette and Design Tokens
"""

# Primary Brand Colors
ACCENT_ORANGE = '#ff6b00'     # Bars, left-side / primary series
NEUTRAL_GRAY = '#666666'      # Right-side series, left-asymmetry bars, group average
REFERENCE_BLACK = '#000000'   # Zero line on asymmetry charts

# UI Colors
BACKGROUND = '#f9fafb'        # App background (gray-50)
SURFACE = '#ffffff'           # Card/container background
BORDER = '#e5e7eb'            # Subtle borders

# Text Colors
TEXT_PRIMARY = '#111827'      # Headings (gray-900)
TEXT_SECONDARY = '#374151'    # Body text (gray-700)
TEXT_MUTED = '#4b5563'        # Captions, subtitle (gray-600)

# Benchmark line colors
HIGH_PERFORMANCE = '#22c55e'  # Green - high performance threshold
MINIMUM_TARGET = '#dc2626'    # Red - minimum / target thresholds

BENCHMARK_COLORS = {
    'high': HIGH_PERFORMANCE,
    'minimum': MINIMUM_TARGET,
    'target': MINIMUM_TARGET,
}

# Bar series colors by role
SERIES_COLORS = {
    'accent': ACCENT_ORANGE,
    'neutral': NEUTRAL_GRAY,
}
