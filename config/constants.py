"""
Centralized constants for FormFlow.
All layout magic numbers live here.
"""

# ===========================================
# PAGE
# ===========================================
PAGE_SIZES = {                        # points (width, height)
    "letter": (612.0, 792.0),
    "legal": (612.0, 1008.0),
    "A4": (595.28, 841.89),
    "A5": (419.53, 595.28),
}
DEFAULT_PAGE_SIZE = "letter"
DEFAULT_MARGINS = {"top": 72.0, "bottom": 72.0, "left": 72.0, "right": 72.0}

# ===========================================
# FONTS
# ===========================================
FONT_BODY = "Helvetica"
FONT_HEADING = "Helvetica-Bold"

# ===========================================
# TABLE OF CONTENTS
# ===========================================
TOC_DEFAULT_TITLE = "Table of Contents"
TOC_DEFAULT_MIN_LEVEL = 1
TOC_DEFAULT_MAX_LEVEL = 3
TOC_TITLE_FONT_SIZE = 18
TOC_ENTRY_FONT_SIZE = 11
TOC_ENTRY_LINE_HEIGHT = 20
TOC_INDENT_PER_LEVEL = 20
TOC_TITLE_MARGIN_BOTTOM = 24
TOC_DOT_LEADER_CHAR = "."
TOC_DOT_LEADER_SPACING = 3            # points between dots
TOC_DOT_LEADER_GAP = 8                # clearance to text and page number
MAX_HEADING_LEVEL = 6

TOC_TITLE_COLOR = "#1a1a1a"
TOC_ENTRY_COLOR = "#333333"
TOC_PAGE_NUMBER_COLOR = "#555555"
TOC_DOT_COLOR = "#999999"

# ===========================================
# HEADER / FOOTER
# ===========================================
FOOTER_TEMPLATE = "Page {page} of {total}"
HEADER_FOOTER_OFFSET = 36             # distance from page edge

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/formflow.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
