"""
Canned response copy.

Explanations are fixed long-form templates selected by intent, with an
optional lead-in sentence keyed by experience level. No product data is
interpolated; the same intent always reads the same way.

Copy guidelines:
1. Lead with what tends to work for the stated need
2. Name the compounds and terpenes involved
3. Close with "start low and go slow" style dosing advice where relevant
"""

from __future__ import annotations

from sage.core.models import ExperienceLevel, IntentCategory


EXPLANATION_TEMPLATES: dict[IntentCategory, str] = {
    IntentCategory.SLEEP: (
        "For better sleep, indica strains and products with CBN work best. "
        "Higher THC with CBN tends to shorten the time it takes to fall asleep, "
        "and sedating terpenes like myrcene and linalool deepen the relaxing effect. "
        "Edibles last longer through the night than flower, so time them an hour or "
        "two before bed. Start with a lower dose if you're new to cannabis."
    ),
    IntentCategory.ENERGY: (
        "Sativa strains provide energizing, cerebral effects perfect for daytime use. "
        "Uplifting terpenes like limonene and pinene support focus and creativity "
        "without the heavy body feel of an indica. Keep doses moderate: too much THC "
        "can tip focus into distraction."
    ),
    IntentCategory.PAIN: (
        "For pain relief, THC and CBD work synergistically. Higher THC products "
        "provide stronger relief, while balanced THC:CBD ratios reduce the "
        "psychoactive effects. Topicals and tinctures are good options when you want "
        "relief without a strong high; increase the dose gradually until you find "
        "your level."
    ),
    IntentCategory.ANXIETY: (
        "For anxiety, lower THC doses or balanced THC:CBD ratios work best. High THC "
        "can sometimes increase anxiety, while CBD may counteract it. Calming "
        "terpenes like linalool can help. Start low and go slow."
    ),
    IntentCategory.BEGINNER: (
        "Welcome to cannabis! Start with lower THC products to find your comfort "
        "level: 2.5-5mg for edibles, or flower under 20% THC. Edibles take 30 to 120 "
        "minutes to kick in, so wait at least two hours before taking more. Keep some "
        "CBD on hand; it can help if you take too much."
    ),
    IntentCategory.DEFAULT: (
        "Here are some popular products from Premo Cannabis in Keyport, NJ. Each "
        "product is lab-tested for quality and potency. Tell me what you're looking "
        "for, whether that's sleep, energy, pain relief or calm, and I can narrow "
        "it down."
    ),
}


EXPERIENCE_PREFIXES: dict[ExperienceLevel, str] = {
    ExperienceLevel.NEW: "Since you're new to cannabis, we'll keep things gentle. ",
    ExperienceLevel.CASUAL: "",
    ExperienceLevel.EXPERIENCED: "Since you know what works for you, here are stronger options to consider. ",
}


def build_explanation(
    intent: IntentCategory,
    experience_level: ExperienceLevel = ExperienceLevel.CASUAL,
) -> str:
    """Return the explanation template for ``intent`` with its experience lead-in."""
    return EXPERIENCE_PREFIXES[experience_level] + EXPLANATION_TEMPLATES[intent]


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------

SUGGESTION_PROMPTS: dict[str, list[str]] = {
    "new": [
        "What is CBD and how does it work?",
        "I'm new to cannabis - where should I start?",
        "What's the difference between CBD and THC?",
        "How do I know what dosage to take?",
        "What's the difference between full spectrum and isolate?",
    ],
    "casual": [
        "I can't sleep, what helps?",
        "What's best for stress relief?",
        "I need something for after workouts",
        "What helps with occasional anxiety?",
        "Best products for daily wellness?",
    ],
    "experienced": [
        "Looking for high-potency options",
        "What are your premium terpene blends?",
        "Best ratio for pain management?",
        "What's your strongest sleep formula?",
        "Any limited edition or craft products?",
    ],
    "general": [
        "Tell me about your specific needs",
        "What effects are you looking for?",
        "Do you prefer flower or edibles?",
        "What's your experience level?",
    ],
}

SUGGESTION_COUNT = 4


def build_suggestions(
    experience_level: ExperienceLevel | None = None,
    count: int = SUGGESTION_COUNT,
) -> list[str]:
    """Return the first ``count`` follow-up prompts for an experience level."""
    key = experience_level.value if experience_level else "general"
    return list(SUGGESTION_PROMPTS.get(key, SUGGESTION_PROMPTS["general"])[:count])


# ---------------------------------------------------------------------------
# Educational copy
# ---------------------------------------------------------------------------

KEY_COMPOUNDS: dict[IntentCategory, dict[str, str]] = {
    IntentCategory.SLEEP: {
        "THC": "Primary psychoactive compound that reduces REM sleep and increases deep sleep",
        "CBN": "Mildly psychoactive cannabinoid with sedating properties",
        "Myrcene": "Terpene known for sedating, muscle-relaxing effects",
    },
    IntentCategory.ENERGY: {
        "Limonene": "Mood-elevating, stress-relieving citrus terpene",
        "Pinene": "Alertness-promoting terpene that may counteract THC memory impairment",
    },
    IntentCategory.PAIN: {
        "THC": "Activates CB1 receptors to modulate pain perception",
        "CBD": "Non-psychoactive; may reduce inflammation and temper THC",
        "Caryophyllene": "Terpene that binds CB2 receptors involved in inflammation",
    },
    IntentCategory.ANXIETY: {
        "CBD": "Non-psychoactive cannabinoid that may counteract THC-induced anxiety",
        "Linalool": "Lavender terpene with anxiolytic properties",
    },
    IntentCategory.BEGINNER: {
        "THC": "Primary psychoactive compound; dose carefully",
        "CBD": "Non-psychoactive, may reduce THC anxiety",
    },
    IntentCategory.DEFAULT: {
        "THC": "Primary psychoactive compound",
        "CBD": "Non-psychoactive, may reduce THC anxiety",
        "CBN": "Mildly psychoactive, promotes sleep",
    },
}


GENERAL_KEY_POINTS = [
    "Start with low doses and increase gradually",
    "Effects can take 5-10min for smoking, 30-120min for edibles",
    "Stay hydrated and have snacks ready",
]

KEY_POINTS: dict[IntentCategory, list[str]] = {
    IntentCategory.PAIN: [
        "THC activates CB1 receptors to modulate pain perception",
        "Topicals provide localized relief without psychoactive effects",
        "Start with lower doses and increase gradually",
    ],
    IntentCategory.BEGINNER: [
        "Wait 2 hours before taking more edibles - they take time to work",
        "Keep CBD on hand - it can help if you get too high",
        "Stay hydrated and have snacks ready",
    ],
}

DOSAGE_GUIDANCE: dict[IntentCategory, str] = {
    IntentCategory.PAIN: "Begin with 5-10mg THC for edibles, one puff for inhalables",
    IntentCategory.BEGINNER: "Edibles: 2.5-5mg THC. Flower: One small puff and wait 15 minutes.",
}
DEFAULT_DOSAGE_GUIDANCE = "Beginners: 2.5-5mg THC for edibles, one small puff for flower"

SAFETY_NOTES: dict[IntentCategory, str] = {
    IntentCategory.PAIN: "Do not drive or operate machinery. Effects can last 4-8 hours with edibles.",
    IntentCategory.BEGINNER: "Never drive while using cannabis. Store products safely away from children and pets.",
}
DEFAULT_SAFETY_NOTES = "Must be 21+. Do not drive. Keep away from children and pets."


def educational_copy(intent: IntentCategory) -> dict:
    """Return the static educational text for an intent."""
    return {
        "key_compounds": dict(KEY_COMPOUNDS[intent]),
        "key_points": list(KEY_POINTS.get(intent, GENERAL_KEY_POINTS)),
        "dosage_guidance": DOSAGE_GUIDANCE.get(intent, DEFAULT_DOSAGE_GUIDANCE),
        "safety_notes": SAFETY_NOTES.get(intent, DEFAULT_SAFETY_NOTES),
    }
