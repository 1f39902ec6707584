from datetime import datetime

import pytest
from sqlalchemy import text

from app.modules.chatbot.service import ChatbotService
from app.modules.community.models import CommunityPost
from app.modules.community.service import CommunityService
from app.modules.hospitals.models import Hospital
from app.modules.hospitals.service import HospitalService
from app.modules.medical_records.models import MedicalRecord
from app.modules.medical_records.service import MedicalRecordService
from app.platform.adapters.responder_keyword import KeywordResponder


async def _overwrite(session, model, column: str, raw: str) -> None:
    await session.execute(text(f"UPDATE {model.__tablename__} SET {column} = :raw"), {"raw": raw})
    await session.commit()
    session.expunge_all()


# ============================================================================
# List columns written outside the app
# ============================================================================


@pytest.mark.parametrize("raw", ['[1, null]', '[{"a": 1}]', '["Pediatrics", 3]'])
async def test_hospital_specialties_with_foreign_elements(session, clock, factory, raw):
    hospital = await factory.hospital()
    await _overwrite(session, Hospital, "specialties", raw)

    page = await HospitalService(session, clock).list_hospitals()
    assert page.items[0].specialties == []
    assert (await HospitalService(session, clock).get(hospital.id)).specialties == []


async def test_post_tags_with_foreign_elements(session, clock, factory):
    post = await factory.post(await factory.user(), tags=["sleep"])
    await _overwrite(session, CommunityPost, "tags", '[{"a": 1}]')

    service = CommunityService(session, clock)
    assert (await service.list_posts()).items[0].tags == []
    assert (await service.get_post(post.id)).tags == []


async def test_record_attachments_with_foreign_elements(session, clock, factory):
    child = await factory.child(await factory.user())
    record = await factory.record(child, attachment_urls=["uploads/a.pdf"])
    await _overwrite(session, MedicalRecord, "attachment_urls", "[42]")

    assert (await MedicalRecordService(session, clock).get(record.id)).attachment_urls == []


async def test_string_lists_still_read_back(session, clock, factory):
    await factory.hospital()
    await _overwrite(session, Hospital, "specialties", '["Pediatrics", "ENT"]')

    page = await HospitalService(session, clock).list_hospitals()
    assert page.items[0].specialties == ["Pediatrics", "ENT"]


# ============================================================================
# Chat timestamps with offsets
# ============================================================================


async def test_chat_timestamps_with_offsets_are_normalised(session, clock, factory):
    user = await factory.user()
    conv = await factory.conversation(user, messages=[
        {"role": "user", "content": "hello", "timestamp": "2024-07-15T08:00:00"},
        {"role": "assistant", "content": "hi", "timestamp": "2024-07-15T08:30:00Z"},
        {"role": "user", "content": "fever", "timestamp": "2024-07-15T13:50:00+05:30"},
    ])
    service = ChatbotService(session, clock, KeywordResponder())

    page = await service.list_for_user(user.id)
    assert page.items[0].last_message_time == datetime(2024, 7, 15, 8, 30)
    assert page.items[0].last_message.content == "fever"

    detail = await service.get(conv.id)
    assert [m.timestamp for m in detail.messages] == [
        datetime(2024, 7, 15, 8, 0),
        datetime(2024, 7, 15, 8, 30),
        datetime(2024, 7, 15, 8, 20),
    ]
