from typing import Sequence
from app.core.derived import haversine_km
from app.core.paging import Page
from app.modules.hospitals.models import Hospital
from app.modules.hospitals.schemas import HospitalListItem

def build_search_page(
    hospitals: Sequence[Hospital],
    total_count: int,
    page: int,
    page_size: int,
    *,
    latitude: float | None = None,
    longitude: float | None = None,
    radius_km: float | None = None,
) -> Page[HospitalListItem]:
    """Annotate an already paginated page with distances and apply the radius.

    Hospitals without coordinates keep distance_km=None and are dropped once a
    radius applies. total_count is the count before any distance filtering.
    """
    # TODO: filter by radius before paginating so totalCount and page contents
    # reflect the distance filter; needs a product decision on nearest-first ordering.
    items: list[HospitalListItem] = []
    has_origin = latitude is not None and longitude is not None
    for h in hospitals:
        item = HospitalListItem.model_validate(h)
        if has_origin and h.latitude is not None and h.longitude is not None:
            distance = haversine_km(latitude, longitude, h.latitude, h.longitude)
            item.distance_km = round(distance, 2)
            if radius_km is not None and distance > radius_km:
                continue
        elif has_origin and radius_km is not None:
            continue
        items.append(item)
    return Page[HospitalListItem].build(items, total_count, page, page_size)
