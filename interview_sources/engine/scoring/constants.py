"""Scoring constants for the corpus search engine.

This module contains all constants used by keyword indexing and line scoring:
- The hand-curated keyword vocabulary
- Per-line score weights
- Excerpt window and deduplication sizes
- Related-term and advanced-topic tables used by the tool layer
"""

# ---------------------------------------------------------------------------
# Line score weights
# ---------------------------------------------------------------------------
TERM_MATCH_SCORE = 10.0  # term appears anywhere in the line
FIELD_DECLARATION_BONUS = 20.0  # line starts with "<term>:"
WORD_BOUNDARY_BONUS = 5.0  # term matches as a whole word
COVERAGE_BONUS_MAX = 10.0  # scaled by matched_terms / total_terms
TITLE_TERM_BONUS = 15.0  # per term found in the file's metadata title

# ---------------------------------------------------------------------------
# Excerpt window and deduplication
# ---------------------------------------------------------------------------
CONTEXT_LINES_BEFORE = 2
CONTEXT_LINES_AFTER = 5

# Hits whose window starts in the same bucket of this many lines of the same
# file collapse to the highest-scoring one.
DEDUP_BUCKET_SIZE = 10

# ---------------------------------------------------------------------------
# Result limits
# ---------------------------------------------------------------------------
DEFAULT_MAX_RESULTS = 8
MAX_RESULTS_LIMIT = 25

# Top score below which search_sources adds a low-relevance note
LOW_RELEVANCE_SCORE = 20.0

# ---------------------------------------------------------------------------
# Keyword vocabulary: interview specifiers, Python keywords seen in code
# blocks, and object class names. Multi-word entries match across any run
# of whitespace.
# ---------------------------------------------------------------------------
KEYWORD_VOCABULARY: tuple[str, ...] = (
    # Question blocks
    "question",
    "fields",
    "buttons",
    "choices",
    "mandatory",
    "code",
    "attachment",
    "attachments",
    "template",
    "content",
    "subquestion",
    "under",
    "help",
    "terms",
    "auto terms",
    "metadata",
    "include",
    "objects",
    "object",
    "generic object",
    "sets",
    "event",
    "action",
    "review",
    "continue button field",
    "signature",
    "yesno",
    "noyes",
    "yesnomaybe",
    # Field specifiers
    "datatype",
    "default",
    "required",
    "validation code",
    "validation messages",
    "show if",
    "hide if",
    "js show if",
    "js hide if",
    "note",
    "html",
    "css",
    "script",
    "features",
    "sections",
    "progress",
    "table",
    "rows",
    "columns",
    "edit",
    "delete buttons",
    "confirm",
    "need",
    "depends on",
    "scan for variables",
    "initial",
    "default role",
    "role",
    # Python in code blocks
    "if",
    "else",
    "elif",
    "for",
    "while",
    "def",
    "class",
    "import",
    "from",
    "modules",
    # Interview flow
    "reset",
    "undefine",
    "reconsider",
    "force ask",
    "force gather",
    "interview help",
    "decoration",
    "image sets",
    "images",
    "audio",
    "video",
    "prevent going back",
    "back button",
    "corner back button",
    "continue button label",
    "resume button label",
    "exit",
    "restart",
    "leave",
    "refresh",
    "reload",
    "url args",
    "action argument",
    "action buttons",
    "background action",
    "background response",
    "background response action",
    "check in",
    "cron",
    "allow cron",
    "send email",
    "email",
    "sms",
    "twilio",
    # Documents
    "docx template file",
    "pdf template file",
    "variable name",
    "valid formats",
    "filename",
    "name",
    "description",
    "skip undefined",
    "pdf/a",
    "tagged pdf",
    "editable",
    "decimal places",
    "language",
    "translations",
    "words",
    "comment",
    "id",
    "supersedes",
    "order",
    "usedefs",
    "mako",
    "jinja2",
    "markdown",
    "raw",
    "target",
    "ga id",
    "segment id",
    "suppress loading",
    "suppress autofill",
    "autocomplete",
    "address autocomplete",
    "geocode",
    "object labeler",
    "instanceName",
    # Object classes
    "DAList",
    "DADict",
    "DASet",
    "DAObject",
    "DAFile",
    "DAFileList",
    "DAFileCollection",
    "DAStaticFile",
    "DAEmail",
    "Individual",
    "Person",
    "Name",
    "Address",
    "LatitudeLongitude",
    "Organization",
    "Thing",
    "Event",
    "PeriodicValue",
    "Value",
    "OfficeList",
    "RoleChangeTracker",
    "DARedis",
    "DAStore",
    "DAGlobal",
    "DACloudStorage",
    "DAOAuth",
    "DAWeb",
    "DAContext",
    "DAEmpty",
    "DALazyTemplate",
    "DALazyTableTemplate",
)

# ---------------------------------------------------------------------------
# Follow-up query suggestions: query term -> terms worth appending
# ---------------------------------------------------------------------------
RELATED_TERMS: dict[str, tuple[str, ...]] = {
    "question": ("fields", "buttons", "choices", "subquestion"),
    "fields": ("datatype", "required", "default", "show if"),
    "mandatory": ("code", "question", "initial"),
    "attachment": ("document", "pdf", "docx", "template"),
    "review": ("edit", "button", "continue button field"),
    "list": ("DAList", "gather", "collect", "for"),
    "object": ("DAObject", "objects", "generic object"),
}

MAX_SUGGESTED_QUERIES = 5

# Topics that usually need server configuration beyond the bundled examples
ADVANCED_TOPICS: tuple[str, ...] = (
    "machine learning",
    "api",
    "webhook",
    "oauth",
    "redis",
    "database",
)

# Suffixes appended to a topic when gathering authoritative snippets
SNIPPET_QUERY_SUFFIXES: tuple[str, ...] = ("", " example", " usage")
