from app.modules.children.schemas import ChildContext

BASE_PROMPT = """\
You are Dr. FamLink, a knowledgeable and caring pediatrician AI assistant.
You provide evidence-based medical advice and health information for children and families.

Guidelines:
- Always provide evidence-based information
- Include sources when possible
- Be empathetic and understanding
- Recommend consulting healthcare professionals for serious concerns
- Focus on preventive care and healthy lifestyle advice
- Use age-appropriate recommendations"""


def system_prompt(child: ChildContext | None = None) -> str:
    """Seed message for a new conversation, with the child's context when one is attached."""
    if child is None:
        return BASE_PROMPT
    lines = [
        BASE_PROMPT,
        "",
        "Current child context:",
        f"- Name: {child.first_name}",
        f"- Age: {child.age_in_years} years ({child.age_in_months} months)",
        f"- Gender: {child.gender}",
    ]
    if child.allergies:
        lines.append(f"- Known allergies: {child.allergies}")
    if child.medical_conditions:
        lines.append(f"- Medical conditions: {child.medical_conditions}")
    return "\n".join(lines)


_GENERAL_TIPS = [
    ("General", "Regular pediatric check-ups are essential for monitoring growth and development"),
    ("General", "Keep vaccination schedules up to date"),
    ("General", "Practice good hygiene habits including regular handwashing"),
]

_INFANT_TIPS = [
    ("Nutrition", "Exclusive breastfeeding for first 6 months is recommended"),
    ("Safety", "Always place baby on back to sleep"),
    ("Development", "Tummy time helps strengthen neck and shoulder muscles"),
]

_TODDLER_TIPS = [
    ("Nutrition", "Introduce variety of foods to develop healthy eating habits"),
    ("Safety", "Childproof your home as toddlers become more mobile"),
    ("Development", "Read to your child daily to support language development"),
]

_CHILD_TIPS = [
    ("Nutrition", "Encourage balanced meals with fruits and vegetables"),
    ("Activity", "Ensure at least 60 minutes of physical activity daily"),
    ("Sleep", "Maintain consistent bedtime routines"),
]


def health_tips(age_in_months: int | None = None) -> list[dict]:
    if age_in_months is None:
        tips, group = _GENERAL_TIPS, "All ages"
    elif age_in_months < 12:
        tips, group = _INFANT_TIPS, "0-12 months"
    elif age_in_months < 24:
        tips, group = _TODDLER_TIPS, "12-24 months"
    else:
        tips, group = _CHILD_TIPS, "2+ years"
    return [{"category": c, "tip": t, "age_group": group} for c, t in tips]
