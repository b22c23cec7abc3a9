"""Constants for Inbox Triage."""

from pathlib import Path

# --- Config paths ---
CONFIG_DIR = Path.home() / ".inbox-triage"
CREDENTIALS_PATH = CONFIG_DIR / "credentials.json"
TOKEN_PATH = CONFIG_DIR / "token.json"

# --- Gmail API ---
SCOPES = ["https://www.googleapis.com/auth/gmail.readonly"]
BATCH_SIZE = 50  # messages per BatchHttpRequest
PAGE_SIZE = 500  # messages per list page
DEFAULT_MAX_MESSAGES = 50
BODY_PREVIEW_CHARS = 500

# --- Lexicons ---
URGENT_KEYWORDS = (
    "urgent", "asap", "emergency", "critical", "immediate", "deadline",
    "time sensitive", "rush", "priority", "expires today", "action required",
    "overdue", "final notice", "last chance", "breaking", "alert",
)

TRADE_URGENT_KEYWORDS = (
    "leak", "flood", "blocked", "burst", "emergency call",
    "no water", "no heating", "gas leak", "electrical fault",
    "power outage", "safety issue", "health hazard",
)

BUSINESS_KEYWORDS = (
    "invoice", "payment", "quote", "estimate", "contract", "proposal",
    "project", "meeting", "appointment", "schedule", "client", "customer",
    "order", "delivery", "service", "maintenance", "repair", "installation",
    "booking", "reservation", "follow up", "feedback", "review",
)

TRADE_BUSINESS_KEYWORDS = (
    "plumbing", "electrical", "hvac", "carpentry", "roofing",
    "bathroom", "kitchen", "renovation", "installation", "repair",
    "maintenance", "inspection", "compliance", "permit", "quote",
)

SPAM_INDICATORS = (
    "free", "win", "winner", "congratulations", "limited time",
    "click here", "act now", "make money", "work from home",
    "no obligation", "risk free", "guarantee", "amazing deal",
    "once in a lifetime", "special offer", "credit check",
)

ADMIN_KEYWORDS = (
    "notification", "update", "newsletter", "report", "summary",
    "confirmation", "receipt", "statement", "reminder", "subscription",
    "account", "billing", "renewal", "terms", "policy", "legal",
)

FOLLOW_UP_PHRASES = ("follow up", "following up")

POSITIVE_WORDS = (
    "thank", "great", "excellent", "pleased", "happy", "satisfied", "good", "wonderful",
)

NEGATIVE_WORDS = (
    "problem", "issue", "complaint", "angry", "upset", "disappointed",
    "terrible", "awful", "urgent", "emergency",
)

ACTION_WORDS = (
    "please", "request", "need", "require", "schedule", "confirm", "respond", "reply", "call",
)

# Keyword extraction walks these in order; overlapping terms are reported once per lexicon.
KEYWORD_LEXICONS = {
    "urgent": URGENT_KEYWORDS,
    "trade_urgent": TRADE_URGENT_KEYWORDS,
    "business": BUSINESS_KEYWORDS,
    "trade_business": TRADE_BUSINESS_KEYWORDS,
    "spam": SPAM_INDICATORS,
    "admin": ADMIN_KEYWORDS,
}

# Personal webmail: a sender on one of these is not counted as a business domain.
PERSONAL_EMAIL_DOMAINS = ("gmail.com", "outlook.com", "yahoo.com")

AUTOMATED_SENDER_PATTERNS = ("noreply", "no-reply")

# --- Customer type indicators ---
COMMERCIAL_INDICATORS = (
    "office", "shop", "store", "factory", "warehouse", "commercial", "business",
    "pty ltd", "company", "corp", "restaurant", "cafe", "retail", "industrial",
)

RESIDENTIAL_INDICATORS = ("home", "house", "apartment", "unit", "residence", "domestic")

JOB_VALUE_CEILING = 100_000

# --- Urgency weights ---
WEIGHT_URGENT_KEYWORD = 15
WEIGHT_TRADE_URGENT_KEYWORD = 25
WEIGHT_VERY_RECENT = 10  # under 1 hour old
WEIGHT_RECENT = 5  # under 4 hours old, stacks with WEIGHT_VERY_RECENT
WEIGHT_SUBJECT_EXCLAMATION = 5
WEIGHT_SUBJECT_ALL_CAPS = 10
WEIGHT_LONG_THREAD = 8
PENALTY_AUTOMATED_SENDER = 10
VERY_RECENT_HOURS = 1
RECENT_HOURS = 4
LONG_THREAD_MARKER = "RE: RE:"

# --- Business relevance weights ---
BUSINESS_BASE_SCORE = 30
WEIGHT_BUSINESS_KEYWORD = 8
WEIGHT_TRADE_BUSINESS_KEYWORD = 12
WEIGHT_BUSINESS_DOMAIN = 15
WEIGHT_INVOICE_OR_QUOTE = 20
WEIGHT_MEETING_OR_APPOINTMENT = 15
WEIGHT_PAYMENT_OR_OVERDUE = 20

# --- Spam weights ---
WEIGHT_SPAM_INDICATOR = 15
WEIGHT_PER_EXCLAMATION = 2
MAX_EXCLAMATION_BONUS = 20
WEIGHT_NOREPLY_CLICK_HERE = 20
WEIGHT_MONEY_AND_FREE = 15

# --- Score bounds ---
SCORE_MIN = 0
SCORE_MAX = 100

# --- Classification thresholds ---
SPAM_THRESHOLD = 60
URGENT_CATEGORY_THRESHOLD = 70
STANDARD_CATEGORY_THRESHOLD = 70
URGENT_PRIORITY_THRESHOLD = 80
HIGH_PRIORITY_URGENCY = 60
HIGH_PRIORITY_BUSINESS = 80
HIGH_PRIORITY_MIN_URGENCY = 40
LOW_PRIORITY_URGENCY = 20
LOW_PRIORITY_BUSINESS = 30

# --- Priorities and categories ---
PRIORITY_URGENT = "urgent"
PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"
PRIORITY_RANK = {PRIORITY_URGENT: 4, PRIORITY_HIGH: 3, PRIORITY_MEDIUM: 2, PRIORITY_LOW: 1}

CATEGORY_URGENT = "urgent"
CATEGORY_STANDARD = "standard"
CATEGORY_FOLLOW_UP = "follow-up"
CATEGORY_ADMIN = "admin"
CATEGORY_SPAM = "spam"
CATEGORIES = (CATEGORY_URGENT, CATEGORY_STANDARD, CATEGORY_FOLLOW_UP, CATEGORY_ADMIN, CATEGORY_SPAM)

# --- Enrichment ---
WORDS_PER_MINUTE = 200

# --- Urgent digest ---
DIGEST_MIN_URGENCY = 60
DIGEST_LIMIT = 10
