import uuid
from types import SimpleNamespace
from datetime import date

import pytest

from app.modules.chatbot import content
from app.modules.children import guidance
from app.modules.children.schemas import ChildContext
from app.platform.adapters.responder_keyword import (
    FALLBACK_REPLY, FEVER_REPLY, VACCINATION_REPLY, KeywordResponder
)


# ============================================================================
# DASHBOARD GUIDANCE
# ============================================================================


@pytest.mark.parametrize("months,band", [(0, "infant"), (12, "infant"), (13, "toddler"), (24, "toddler"), (25, "preschool")])
def test_age_band_boundaries(months, band):
    assert guidance.age_band(months) == band


def test_infant_milestones_at_six_months():
    milestones = guidance.growth_milestones(6)
    assert [(m["milestone"], m["status"]) for m in milestones] == [
        ("Sits without support", "Expected"),
        ("Says first words", "Upcoming"),
        ("Walks independently", "Upcoming"),
    ]


def test_preschool_milestones_all_expected():
    assert {m["status"] for m in guidance.growth_milestones(40)} == {"Expected"}


def test_dashboard_tips_follow_band():
    assert guidance.health_tips(6)[0] == {
        "category": "Nutrition",
        "tip": "Continue breastfeeding or formula feeding",
        "priority": "High",
    }
    assert guidance.health_tips(18)[0]["tip"] == "Introduce variety of solid foods"
    assert guidance.health_tips(30)[2]["category"] == "Education"


# ============================================================================
# CHAT CONTENT
# ============================================================================


@pytest.mark.parametrize(
    "months,group",
    [(None, "All ages"), (0, "0-12 months"), (11, "0-12 months"), (12, "12-24 months"), (24, "2+ years")],
)
def test_chat_health_tip_groups(months, group):
    tips = content.health_tips(months)
    assert len(tips) == 3
    assert {t["age_group"] for t in tips} == {group}


def _context(**kw):
    data = {
        "id": uuid.uuid4(),
        "first_name": "Meera",
        "last_name": "Rao",
        "date_of_birth": date(2024, 1, 15),
        "gender": "Female",
    }
    data.update(kw)
    return ChildContext.of(SimpleNamespace(**data), date(2024, 7, 15))


def test_system_prompt_without_child_is_base_prompt():
    assert content.system_prompt() == content.BASE_PROMPT
    assert content.BASE_PROMPT.startswith("You are Dr. FamLink")


def test_system_prompt_with_child_context():
    prompt = content.system_prompt(_context(allergies="Peanuts"))
    assert "Current child context:" in prompt
    assert "- Name: Meera" in prompt
    assert "- Age: 0 years (6 months)" in prompt
    assert "- Known allergies: Peanuts" in prompt
    assert "Medical conditions" not in prompt


# ============================================================================
# KEYWORD RESPONDER
# ============================================================================


@pytest.mark.parametrize(
    "message,expected",
    [
        ("My son has a FEVER since morning", FEVER_REPLY),
        ("When is the next vaccine due?", VACCINATION_REPLY),
        ("Vaccination schedule please", VACCINATION_REPLY),
        ("fever after vaccination", FEVER_REPLY),
        ("How much should a toddler sleep?", FALLBACK_REPLY),
        ("", FALLBACK_REPLY),
    ],
)
async def test_keyword_responder(message, expected):
    reply = await KeywordResponder().respond(message)
    assert reply.content == expected.content
    assert reply.evidence == expected.evidence
    assert reply.sources == expected.sources


async def test_keyword_responder_returns_copies():
    reply = await KeywordResponder().respond("fever")
    reply.sources.append("Blog")
    assert "Blog" not in FEVER_REPLY.sources
