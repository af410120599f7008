"""
Standard example queries.

Separated from main config to keep configuration declarative.
Used by the demo script and as fixtures in tests.
"""

# One representative query per intent category
INTENT_QUERIES = {
    "sleep": "I can't sleep, what helps?",
    "energy": "what helps with energy and focus?",
    "pain": "Something for pain relief?",
    "anxiety": "What's best for stress relief?",
    "beginner": "I'm a beginner, where should I start?",
    "default": "xyzzy nonsense",
}

# Queries exercising overlaps and edge cases
EDGE_CASE_QUERIES = [
    "",
    "insomnia and anxiety",
    "cbd for sleep",
    "my back aches after workouts",
    "first time trying edibles",
    "pre-rolls please",
]

DEMO_QUERIES = list(INTENT_QUERIES.values()) + EDGE_CASE_QUERIES
