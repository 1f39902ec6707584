"""
Static age-banded guidance shown on the child dashboard.

Bands are by age in months: up to 12, 13 to 24, and over 24.
"""

# (milestone, expected age, months from which it is "Expected")
_MILESTONES = {
    "infant": [
        ("Sits without support", "6-8 months", 6),
        ("Says first words", "10-14 months", 10),
        ("Walks independently", "12-15 months", 12),
    ],
    "toddler": [
        ("Uses 2-word phrases", "18-24 months", 18),
        ("Runs steadily", "18-24 months", 18),
        ("Shows interest in potty training", "20-30 months", 20),
    ],
    "preschool": [
        ("Speaks in sentences", "2-3 years", 24),
        ("Plays with other children", "2-4 years", 24),
        ("Shows independence", "2-4 years", 24),
    ],
}

# (category, tip, priority)
_TIPS = {
    "infant": [
        ("Nutrition", "Continue breastfeeding or formula feeding", "High"),
        ("Safety", "Baby-proof your home as mobility increases", "High"),
        ("Development", "Provide tummy time for muscle development", "Medium"),
    ],
    "toddler": [
        ("Nutrition", "Introduce variety of solid foods", "High"),
        ("Development", "Read books together daily", "High"),
        ("Safety", "Secure furniture and use safety gates", "High"),
    ],
    "preschool": [
        ("Nutrition", "Establish healthy eating routines", "High"),
        ("Development", "Encourage social play with peers", "Medium"),
        ("Education", "Consider preschool readiness activities", "Medium"),
    ],
}


def age_band(age_in_months: int) -> str:
    if age_in_months <= 12:
        return "infant"
    if age_in_months <= 24:
        return "toddler"
    return "preschool"


def growth_milestones(age_in_months: int) -> list[dict]:
    return [
        {
            "milestone": name,
            "expected_age": expected,
            "status": "Expected" if age_in_months >= threshold else "Upcoming",
        }
        for name, expected, threshold in _MILESTONES[age_band(age_in_months)]
    ]


def health_tips(age_in_months: int) -> list[dict]:
    return [
        {"category": category, "tip": tip, "priority": priority}
        for category, tip, priority in _TIPS[age_band(age_in_months)]
    ]
