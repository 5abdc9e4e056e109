# ============================================================================
# src/prescription_reader/constants/patterns.py
# ============================================================================
"""
Prescription Text Patterns

Regular expression sources and keyword lists used by the extractors.
Everything here is policy: tune or extend these tables, the extractors
only consume them. Patterns are compiled case-insensitive unless a
scoped (?-i:...) group says otherwise.
"""

# ----------------------------------------------------------------------------
# Header fields (doctor, patient, date)
# ----------------------------------------------------------------------------

# Name captures stay on their own line: [ \t] instead of \s
_NAME_CHARS = r"[a-z][a-z \t.]*"
_PLAIN_NAME_CHARS = r"[a-z][a-z \t]*"

# Ordered by priority, first match wins, group 1 is the name
DOCTOR_PATTERNS = [
    # "Dr. Jane Smith", "Doctor: Jane Smith"
    rf"\b(?:dr|doctor)\b\.?[ \t]*[:\-]?[ \t]*({_NAME_CHARS})",
    # "Prescribed by: Jane Smith", "Physician - Jane Smith"
    rf"\b(?:prescribed[ \t]*by|physician)\b[ \t]*[:\-]?[ \t]*({_NAME_CHARS})",
    # "Jane Smith, MD", "Smith M.D."
    r"\b([a-z]+(?:[ \t]+[a-z]+)?)[ \t]*,?[ \t]*(?-i:M\.D\.?|MD|D\.O\.?|DO)(?!\w)",
]

PATIENT_PATTERNS = [
    # "Patient: John Doe", "Patient Name: John Doe", "Name - John Doe"
    rf"\b(?:patient(?:[ \t]+name)?|name)\b[ \t]*[:\-]?[ \t]*({_PLAIN_NAME_CHARS})",
    # "For: John Doe", "To John Doe"
    rf"\b(?:for|to)\b[ \t]*[:\-]?[ \t]*({_PLAIN_NAME_CHARS})",
]

_MONTHS = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sept?(?:ember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_ORDINAL = r"(?:st|nd|rd|th)?"

DATE_PATTERNS = [
    # 15/01/2024, 15-1-24, 15.01.2024
    r"\b(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})\b",
    # 2024-01-15, 2024/1/15
    r"\b(\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2})\b",
    # March 5, 2024 / 5th March 2024
    rf"\b({_MONTHS}\.?[ \t]+\d{{1,2}}{_ORDINAL},?[ \t]+\d{{4}}"
    rf"|\d{{1,2}}{_ORDINAL}[ \t]+{_MONTHS}\.?,?[ \t]+\d{{4}})\b",
]

# ----------------------------------------------------------------------------
# Medication detail fields
# ----------------------------------------------------------------------------

# Numbers may follow a letter ("Take500mg", "x7days") but never another
# digit or a decimal point
_NUMBER_START = r"(?<![\d.])"

# Field name -> pattern. Order is the assignment priority for detail lines.
FIELD_PATTERNS = {
    # 500mg, 2 tablets, 10 ml, 1.5 caps
    "dosage": (
        _NUMBER_START + r"(\d+(?:\.\d+)?\s*"
        r"(?:mcg|mg|ml|g|tablets?|tabs?|capsules?|caps?|pills?|drops?|units?))\b"
    ),
    # 3 times daily, twice a day, bedtime, after meals, q8h, b.i.d.
    "frequency": (
        r"(" + _NUMBER_START + r"\d+\s*(?:x|times?)\s*(?:daily|a\s*day|per\s*day)\b"
        r"|\b(?:once|twice|thrice)\s*(?:daily|a\s*day)\b"
        r"|\b(?:morning|evening|night|bedtime)\b"
        r"|\b(?:before|after)\s*(?:meals?|food)\b"
        r"|\bq\.?\d+[dh]\b"
        r"|\b[bt]\.?i\.?d\b\.?"
        r"|\bq\.?i\.?d\b\.?)"
    ),
    # 7 days, 2 weeks, 1 month
    "duration": _NUMBER_START + r"(\d+\s*(?:days?|weeks?|months?|years?))\b",
}

# Numbered ("1." / "1)") and bulleted ("*" / "-" / "•") entry prefixes.
# "1.5 tablets" is a dose, not item one.
LIST_MARKER_PATTERNS = [
    r"^\d+[.)](?!\d)\s*",
    r"^[*\-•]\s*",
]

# Lines containing any of these (case-insensitive substring) are header
# or letterhead metadata and never belong to a medication entry
SKIP_KEYWORDS = (
    "prescription",
    "rx",
    "date",
    "doctor",
    "dr.",
    "patient",
    "name",
    "address",
    "phone",
    "license",
)

# ----------------------------------------------------------------------------
# Fallback medication names
# ----------------------------------------------------------------------------

FALLBACK_STOP_WORDS = frozenset({
    "the", "and", "for", "with", "from",
    "take", "daily", "twice", "once", "every",
})

# Common generic-name endings
DRUG_SUFFIXES = (
    "cillin", "mycin", "zole", "pram", "pine", "pril",
    "sartan", "statin", "profen", "azole", "idine", "olol",
)

# Tried in order per token. The capitalized shape must cover the whole
# token, the suffix pattern reports just the word it found.
FALLBACK_NAME_PATTERNS = [
    r"(?-i:^[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*$)",
    r"\w*(?:" + "|".join(DRUG_SUFFIXES) + r")\w*",
]

# ----------------------------------------------------------------------------
# Notes block
# ----------------------------------------------------------------------------

NOTE_LABELS = ("notes", "note", "instructions", "instruction", "sig", "directions", "direction")

# Label, optional ":"/"-", then everything up to a blank line, a line that
# starts with an uppercase letter, or the end of the text
NOTES_PATTERN = (
    r"\b(?:" + "|".join(NOTE_LABELS) + r")\b[ \t]*[:\-]?\s*"
    r"([\s\S]*?)"
    r"(?=\n[ \t\r]*\n|\n[ \t]*(?-i:[A-Z])|\Z)"
)
