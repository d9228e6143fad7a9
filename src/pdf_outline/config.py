"""
Constants and configuration for outline extraction and relevance analysis.

All size thresholds are ratios of document-wide statistics rather than absolute
point sizes, so the same values apply to documents with different body fonts.
"""

# ----- Fragment collection -----

# Fragments must be longer than this after trimming
MIN_FRAGMENT_CHARS = 1

# Case-insensitive font-name marker for bold text
BOLD_FONT_MARKER = "bold"

# ----- Heading candidate scoring -----

# Candidates longer than this are never headings
MAX_CANDIDATE_CHARS = 120

# size > avg * ratio counts as large text
LARGE_TEXT_RATIO = 1.1

# Lines shorter than this get the short-line bonus
SHORT_LINE_CHARS = 80

# All caps only scores when shorter than this
ALL_CAPS_MAX_CHARS = 50
ALL_CAPS_MIN_CHARS = 3

BOLD_SCORE = 3
LARGE_TEXT_SCORE = 2
NUMBERED_SCORE = 2
ALL_CAPS_SCORE = 2
COLON_SCORE = 1
FORM_FIELD_SCORE = 1
SHORT_LINE_SCORE = 1

# score >= STRONG qualifies alone, score >= WEAK needs bold or large text
STRONG_HEADING_SCORE = 3
WEAK_HEADING_SCORE = 2

# ----- Heading levels -----

H1_MAX_SIZE_RATIO = 0.9
H2_SIZE_RATIO = 1.3

# Title must be shorter than this
MAX_TITLE_CHARS = 100

MAX_OUTLINE_ENTRIES = 50

# Relaxed pass used when the scored pass found nothing: (min, max) exclusive
FALLBACK_MIN_CHARS = 5
FALLBACK_MAX_CHARS = 100
FALLBACK_LEVEL = "H2"

# ----- Full text -----

PAGE_MARKER = "--- PAGE {page} ---"
PAGE_ERROR_PLACEHOLDER = "[Error extracting content from this page]"

# Baselines closer than this are treated as one visual line
SAME_LINE_TOLERANCE = 5

# ----- Relevance -----

MAX_KEYWORDS = 10
MIN_KEYWORD_CHARS = 3
SUMMARY_TRIGGERS = ("summarize", "summary")

# ----- Summary digest -----

MIN_SENTENCE_CHARS = 20
LONG_SENTENCE_CHARS = 50
MIN_BULLET_CHARS = 10
MAX_PAGE_KEY_POINTS = 8
MAX_FALLBACK_SENTENCES = 3
MAX_DOCUMENT_KEY_POINTS = 10

SUMMARY_KEYWORDS = (
    "important", "key", "main", "significant", "conclusion", "result",
    "summary", "overview", "challenge", "mission", "objective", "goal",
    "purpose",
)

# First matching group wins
DOCUMENT_TYPES = (
    (("hackathon", "challenge"), "Competition/Challenge Document"),
    (("report", "analysis"), "Report/Analysis"),
    (("manual", "guide"), "Manual/Guide"),
    (("proposal",), "Proposal"),
    (("contract", "agreement"), "Contract/Agreement"),
)
DEFAULT_DOCUMENT_TYPE = "General Document"

# ----- Session / CLI -----

DEFAULT_INPUT_DIR = "/app/input"
DEFAULT_OUTPUT_DIR = "/app/output"
RENDER_ZOOM = 1.0
EXTRACTION_WORKERS = 2
