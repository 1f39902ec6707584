import uuid
from datetime import datetime

import pytest

from app.core.errors import InvalidArgument, NotFound
from app.modules.hospitals.service import HospitalService


@pytest.fixture
def service(session, clock):
    return HospitalService(session, clock)


async def test_list_orders_by_rating_then_name(service, factory):
    await factory.hospital(name="Beta", rating=4.2)
    await factory.hospital(name="Alpha", rating=4.2)
    await factory.hospital(name="Gamma", rating=4.8)
    page = await service.list_hospitals()
    assert [h.name for h in page.items] == ["Gamma", "Alpha", "Beta"]
    assert page.total_count == 3


async def test_list_filters(service, factory):
    await factory.hospital(name="Rainbow", city="Bengaluru", specialties=["Pediatrics", "Neonatology"])
    await factory.hospital(name="Ortho Care", city="Bengaluru", specialties=["Pediatric Orthopedics"])
    await factory.hospital(name="Sion", city="Mumbai", state="Maharashtra", specialties=["Pediatrics"])

    by_city = await service.list_hospitals(city="bengal")
    assert {h.name for h in by_city.items} == {"Rainbow", "Ortho Care"}

    by_specialty = await service.list_hospitals(specialty="Pediatrics")
    assert {h.name for h in by_specialty.items} == {"Rainbow", "Sion"}

    by_state = await service.list_hospitals(state="maharashtra")
    assert [h.name for h in by_state.items] == ["Sion"]


async def test_list_page_beyond_last_is_empty(service, factory):
    for _ in range(3):
        await factory.hospital()
    page = await service.list_hospitals(page=3, page_size=2)
    assert page.items == []
    assert page.total_count == 3
    assert page.total_pages == 2


async def test_list_hides_inactive(service, factory):
    gone = await factory.hospital()
    gone.is_active = False
    await factory.session.commit()
    assert (await service.list_hospitals()).total_count == 0
    with pytest.raises(NotFound):
        await service.get(gone.id)


async def test_search_matches_name_city_and_specialty(service, factory):
    await factory.hospital(name="Rainbow", specialties=["Neonatology"])
    await factory.hospital(name="Sion", city="Mumbai", state="Maharashtra", specialties=["Cardiology"])
    assert [h.name for h in await service.search("rain")] == ["Rainbow"]
    assert [h.name for h in await service.search("MUMBAI")] == ["Sion"]
    assert [h.name for h in await service.search("neonat")] == ["Rainbow"]
    assert await service.search("100%") == []


async def test_search_requires_query(service):
    with pytest.raises(InvalidArgument):
        await service.search("   ")


async def test_detail_lists_upcoming_slots(service, factory):
    user = await factory.user()
    hospital = await factory.hospital()
    await factory.appointment(user, hospital, appointment_date=datetime(2024, 7, 1, 10, 0))
    await factory.appointment(user, hospital, appointment_date=datetime(2024, 9, 1, 10, 0))
    await factory.appointment(user, hospital, appointment_date=datetime(2024, 8, 1, 10, 0))

    detail = await service.get(hospital.id)
    assert [a.appointment_date for a in detail.upcoming_appointments] == [
        datetime(2024, 8, 1, 10, 0), datetime(2024, 9, 1, 10, 0),
    ]
    assert detail.full_address == "%s, Bengaluru, Karnataka 560001" % hospital.address


async def test_get_unknown(service):
    with pytest.raises(NotFound):
        await service.get(uuid.uuid4())
