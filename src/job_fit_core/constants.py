"""Shared constants and keyword tables for job-fit-scorer."""

from __future__ import annotations

import re

# Criterion keys, in aggregation order
JOB_TO_USER_CRITERIA: tuple[str, ...] = (
    "salary",
    "workplace_type",
    "equity_bonus",
    "benefits",
    "business_lifecycle",
    "org_stability",
    "hiring_urgency",
)
USER_TO_JOB_CRITERIA: tuple[str, ...] = (
    "title_seniority",
    "skill_match",
    "industry_alignment",
    "experience_level",
)

MAX_CRITERION_SCORE = 50

# --- Skill matching ---
SKILL_SIMILARITY_FUNCTIONS: tuple[str, ...] = ("jaccard", "cosine")

# --- Workplace ---
DEFAULT_ACCEPTABLE_WORKPLACE_TYPES: tuple[str, ...] = ("remote",)
DEFAULT_UNACCEPTABLE_WORKPLACE_TYPES: tuple[str, ...] = ("on_site",)

# --- Benefits catalog: key -> (label, weight, patterns) ---
BENEFIT_CATALOG: dict[str, tuple[str, int, tuple[str, ...]]] = {
    "medical": (
        "Medical",
        12,
        (
            r"medical\s*(insurance|coverage|benefits|plan)",
            r"health\s*(insurance|coverage|benefits|plan)",
            r"disability\s*(insurance|coverage|benefits|plan)",
        ),
    ),
    "dental": ("Dental", 8, (r"dental\s*(insurance|coverage|benefits|plan)",)),
    "vision": ("Vision", 6, (r"vision\s*(insurance|coverage|benefits|plan)", r"eye\s+care")),
    "401k": (
        "401k",
        12,
        (r"401\s*\(?\s*k\)?", r"retirement\s*(plan|match|matching|contribution)", r"pension"),
    ),
    "hsa_fsa": (
        "HSA/FSA",
        6,
        (r"\bhsa\b", r"\bfsa\b", r"health\s+savings", r"flexible\s+spending"),
    ),
    "pto": (
        "PTO",
        10,
        (
            r"\bpto\b",
            r"paid\s+time\s+off",
            r"time\s+off",
            r"unlimited\s+(pto|vacation)",
            r"vacation\s+(days?|time|policy|weeks?)",
            r"holiday\s+program",
            r"life\s+care\s+days",
        ),
    ),
    "paid_parental": (
        "Paid Parental",
        8,
        (
            r"parental\s+leave",
            r"maternity\s+leave",
            r"paternity\s+leave",
            r"family\s+leave",
            r"paid\s+(maternity|paternity)",
            r"child\s*care\s*(support|assistance|benefits)",
        ),
    ),
    "tuition": (
        "Tuition Reimbursement",
        6,
        (
            r"tuition\s+(reimbursement|assistance|support)",
            r"education\s+(reimbursement|assistance|benefit)",
            r"student\s+loan\s+(assistance|support|repayment)",
        ),
    ),
    "learning_stipend": (
        "Learning Stipend",
        6,
        (
            r"learning\s+(stipend|budget|allowance)",
            r"professional\s+development",
            r"training\s+(budget|stipend)",
            r"conference\s+budget",
        ),
    ),
    "wfh_reimbursement": (
        "WFH Reimbursement",
        6,
        (
            r"work\s+from\s+home\s+(stipend|reimbursement|budget)",
            r"home\s+office\s+(stipend|reimbursement|setup)",
            r"remote\s+work\s+(stipend|budget)",
            r"equipment\s+allowance",
            r"commuter\s+benefits?",
        ),
    ),
    "relocation": (
        "Relocation",
        8,
        (
            r"relocation\s+(assistance|package|support|reimbursement)",
            r"moving\s+(assistance|reimbursement)",
        ),
    ),
}

BENEFIT_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    key: tuple(re.compile(p, re.IGNORECASE) for p in patterns)
    for key, (_, _, patterns) in BENEFIT_CATALOG.items()
}

# Featured-benefit text fragment -> catalog label; first fragment contained wins
FEATURED_BENEFIT_LABELS: dict[str, str] = {
    "medical insurance": "Medical",
    "health insurance": "Medical",
    "disability insurance": "Medical",
    "dental insurance": "Dental",
    "vision insurance": "Vision",
    "401(k)": "401k",
    "401k": "401k",
    "retirement": "401k",
    "hsa": "HSA/FSA",
    "fsa": "HSA/FSA",
    "health savings": "HSA/FSA",
    "flexible spending": "HSA/FSA",
    "pto": "PTO",
    "paid time off": "PTO",
    "vacation": "PTO",
    "paid parental": "Paid Parental",
    "maternity leave": "Paid Parental",
    "paternity leave": "Paid Parental",
    "parental leave": "Paid Parental",
    "child care": "Paid Parental",
    "tuition": "Tuition Reimbursement",
    "education assistance": "Tuition Reimbursement",
    "student loan": "Tuition Reimbursement",
    "learning stipend": "Learning Stipend",
    "professional development": "Learning Stipend",
    "training budget": "Learning Stipend",
    "work from home": "WFH Reimbursement",
    "home office": "WFH Reimbursement",
    "remote work": "WFH Reimbursement",
    "commuter": "WFH Reimbursement",
    "relocation": "Relocation",
    "moving assistance": "Relocation",
}

# Preferred-benefit key (after separator normalization) -> catalog label
PREFERRED_BENEFIT_LABELS: dict[str, str] = {
    "medical": "Medical",
    "medical insurance": "Medical",
    "health insurance": "Medical",
    "disability insurance": "Medical",
    "dental": "Dental",
    "dental insurance": "Dental",
    "vision": "Vision",
    "vision insurance": "Vision",
    "401k": "401k",
    "401(k)": "401k",
    "retirement": "401k",
    "hsa": "HSA/FSA",
    "fsa": "HSA/FSA",
    "hsa/fsa": "HSA/FSA",
    "pto": "PTO",
    "paid time off": "PTO",
    "parental": "Paid Parental",
    "paid parental": "Paid Parental",
    "paid maternity leave": "Paid Parental",
    "paid paternity leave": "Paid Parental",
    "childcare support": "Paid Parental",
    "tuition": "Tuition Reimbursement",
    "tuition assistance": "Tuition Reimbursement",
    "tuition reimbursement": "Tuition Reimbursement",
    "student loan assistance": "Tuition Reimbursement",
    "learning": "Learning Stipend",
    "learning stipend": "Learning Stipend",
    "wfh": "WFH Reimbursement",
    "wfh reimbursement": "WFH Reimbursement",
    "work from home": "WFH Reimbursement",
    "remote work": "WFH Reimbursement",
    "commuter benefits": "WFH Reimbursement",
    "relocation": "Relocation",
}

# --- Business lifecycle ---
SEED_KEYWORDS: tuple[str, ...] = (
    "pre-seed", "pre seed", "preseed", "seed", "angel", "angel-backed",
    "bootstrapped", "self-funded", "founder-funded", "pre-revenue",
    "just launched", "newly launched", "stealth", "stealth mode",
)
STARTUP_KEYWORDS: tuple[str, ...] = (
    "startup", "start-up", "early stage", "early-stage",
    "series a", "series-a", "series seed",
    "emerging company", "young company", "small but growing",
    "scrappy", "nimble", "agile team", "small team",
    "first hire", "founding team", "early employee",
    "building from scratch", "greenfield",
)
GROWTH_KEYWORDS: tuple[str, ...] = (
    "series b", "series-b", "series c", "series-c",
    "hypergrowth", "hyper-growth", "high-growth", "high growth",
    "scaling rapidly", "scaling", "rapid growth", "fast-growing",
    "growth stage", "growth-stage", "growth company",
    "doubling", "tripling",
    "recently raised", "just raised", "backed by",
    "expanding rapidly", "hiring aggressively",
)
MATURITY_KEYWORDS: tuple[str, ...] = (
    "series d", "series-d", "series e", "series-e", "series f",
    "late stage", "late-stage", "pre-ipo", "pre ipo",
    "enterprise", "established", "mature", "publicly traded",
    "fortune 500", "fortune 1000", "fortune 100", "f500", "f100",
    "global leader", "market leader", "industry leader",
    "decades of experience", "over 20 years", "over 30 years",
    "well-established", "household name", "iconic brand",
    "publicly held", "nyse", "nasdaq", "stock symbol",
)
EXPANSION_KEYWORDS: tuple[str, ...] = (
    "expanding", "expansion", "new markets", "entering new",
    "international growth", "global expansion", "going global",
    "new territory", "new region", "opening offices",
    "launching in", "expanding to", "international presence",
    "multi-national", "multinational",
)
LIFECYCLE_DECLINE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), label)
    for pattern, label in (
        (r"\brestructuring\b", "restructuring"),
        (r"\bwind\s+down\b", "wind down"),
        (r"\bwinding\s+down\b", "winding down"),
        (r"\bbankruptcy\b", "bankruptcy"),
        (r"\bchapter\s+11\b", "chapter 11"),
        (r"\bchapter\s+7\b", "chapter 7"),
        (r"\blayoffs?\b", "layoffs"),
        (r"\bdownsizing\b", "downsizing"),
        (r"\breduction\s+in\s+force\b", "reduction in force"),
        (r"\b(?:rif|r\.i\.f\.)(?!\w)", "RIF"),
        (r"\bturnaround\b", "turnaround"),
        (r"\bturn\s+around\b", "turn around"),
        (r"\bpivot\s+required\b", "pivot required"),
        (r"\bcost\s+cutting\b", "cost cutting"),
        (r"\bbudget\s+cuts?\b", "budget cuts"),
        (r"\bfinancial\s+difficulties\b", "financial difficulties"),
    )
)
LIFECYCLE_SCORES: dict[str, int] = {
    "seed": 15,
    "startup": 25,
    "growth": 45,
    "maturity": 50,
    "expansion": 45,
    "decline": 5,
    "unknown": 25,
}
LIFECYCLE_LABELS: dict[str, str] = {
    "seed": "Seed Stage",
    "startup": "Early Stage/Startup",
    "growth": "Growth Stage",
    "maturity": "Mature/Enterprise",
    "expansion": "Expansion Phase",
    "decline": "Decline/Restructuring",
    "unknown": "Unknown",
}

# --- Org stability ---
ORG_GROWTH_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (r"\bgrowing\b", r"\bexpanding\s+team\b", r"\bscaling\b", r"\bhiring\b", r"\bnew\s+positions?\b")
)
ORG_DECLINE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\blayoffs?\b",
        r"\brestructuring\b",
        r"\bdownsizing\b",
        r"\bheadcount\s+reduction\b",
        r"\bcost\s+cutting\b",
    )
)

# --- Hiring urgency ---
URGENCY_KEYWORDS: tuple[str, ...] = (
    "immediately", "urgent", "asap", "right away",
    "fast-growing", "rapid growth", "scaling quickly",
    "new role", "newly created", "just opened",
    "backfill", "immediate start", "start date asap",
)

# --- Title & seniority ---
VP_KEYWORDS: tuple[str, ...] = ("vp", "vice president", "cro", "cmo", "cgo", "chief")
HEAD_KEYWORDS: tuple[str, ...] = ("head of",)
DIRECTOR_KEYWORDS: tuple[str, ...] = ("director",)
MANAGER_KEYWORDS: tuple[str, ...] = ("manager", "lead")
TITLE_GROWTH_KEYWORDS: tuple[str, ...] = ("growth", "revenue", "revops", "gtm", "go-to-market")
TITLE_GROWTH_BONUS = 5

# --- Industry ---
INDUSTRY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "telecom": ("telecom", "telecommunications", "wireless", "mobile network", "5g", "carrier"),
    "insurance": ("insurance", "insurtech", "underwriting", "claims"),
    "consumer_electronics": ("consumer electronics", "hardware", "devices", "gadgets", "electronics"),
    "saas": ("saas", "software as a service", "b2b software", "enterprise software", "cloud software"),
    "d2c_ecommerce": ("d2c", "dtc", "ecommerce", "e-commerce", "retail", "consumer goods", "cpg"),
    "fintech": ("fintech", "financial technology", "payments", "banking", "lending"),
    "healthtech": (
        "healthtech", "healthcare", "health tech", "medical", "wellness",
        "hospital", "hospitals", "clinic", "clinical", "patient",
    ),
    "edtech": ("edtech", "education", "e-learning"),
    "martech": ("martech", "marketing technology", "adtech", "advertising"),
}
INDUSTRY_LABELS: dict[str, str] = {
    "telecom": "Telecom",
    "insurance": "Insurance",
    "consumer_electronics": "Consumer Electronics",
    "saas": "SaaS",
    "d2c_ecommerce": "D2C / E-commerce",
    "fintech": "Fintech",
    "healthtech": "Health",
    "edtech": "EdTech",
    "martech": "MarTech",
}
ADJACENT_INDUSTRIES: tuple[tuple[str, ...], ...] = (
    ("saas", "b2b software", "enterprise"),
    ("d2c_ecommerce", "retail", "cpg"),
    ("fintech", "insurance", "banking"),
    ("healthtech", "wellness", "medical"),
)

# --- Experience ---
EXPERIENCE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"(\d+)\+?\s*years?\s+(?:of\s+)?experience",
        r"experience\s*:\s*(\d+)\+?\s*years?",
        r"minimum\s+(?:of\s+)?(\d+)\+?\s*years?",
        r"at\s+least\s+(\d+)\+?\s*years?",
    )
)
SENIOR_SIGNALS: tuple[str, ...] = (
    "senior", "principal", "lead", "head of", "director", "vp", "vice president",
)
JUNIOR_SIGNALS: tuple[str, ...] = ("junior", "entry level", "entry-level", "associate", "trainee")
SENIOR_EXPERIENCE_YEARS = 10

# --- Interpretation ---
TIER_CONVERSATION_STARTERS: dict[str, tuple[str, ...]] = {
    "STRONG FIT": (
        "What does success look like in the first 90 days?",
        "What are the biggest challenges the team is facing right now?",
    ),
    "GOOD FIT": (
        "Can you tell me more about the team structure?",
        "What are the key metrics this role will be responsible for?",
    ),
    "MODERATE FIT": (
        "What skills are most critical for success in this role?",
        "How does this role fit into the company's growth plans?",
    ),
    "WEAK FIT": (),
    "POOR FIT": (),
}
CONCERN_CONVERSATION_STARTERS: dict[str, tuple[str, ...]] = {
    "title_seniority": ("What is the growth path for this role?",),
    "org_stability": (
        "How is the reporting structure organized?",
        "What recent changes has the team gone through?",
    ),
    "salary": ("Is there flexibility in the compensation range for this role?",),
    "workplace_type": ("How flexible is the team on remote or hybrid work?",),
}
FIT_ACTIONS: dict[str, str] = {
    "STRONG FIT": "PURSUE - Strong match, prioritize this application",
    "GOOD FIT": "PURSUE - Good match, worth applying with tailored materials",
    "MODERATE FIT": "CONSIDER - Moderate match, research further before applying",
    "WEAK FIT": "LOW PRIORITY - Weak match, only pursue if other criteria are compelling",
    "POOR FIT": "SKIP - Poor fit, focus on better-aligned opportunities",
}
HARD_NO_ACTION = (
    "HARD NO - Deal-breaker detected. Review the breakdown to understand why this role doesn't fit."
)
MAX_CONVERSATION_STARTERS = 3
