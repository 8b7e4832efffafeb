"""CaretakerService: status transitions, rating order and specialty search."""

import uuid
from decimal import Decimal

from baribhara.application.services import CaretakerService
from baribhara.domain.enums import CaretakerStatus
from baribhara.domain.events import Topic
from baribhara.schemas.caretaker import (
    CaretakerCreate,
    CaretakerSearchParams,
    CaretakerUpdate,
)
from baribhara.schemas.common import PaginationParams
from tests.fakes import RecordingPublisher

_phones = iter(range(1000, 9999))


async def _caretaker(
    service: CaretakerService,
    *,
    name: str = "Karim",
    rating: str | None = None,
    specialties: list[str] | None = None,
    verified: bool = False,
):
    created = await service.create(
        CaretakerCreate(
            name=name,
            phone_number=f"+88019110{next(_phones)}",
            user_id=uuid.uuid4(),
            city="Dhaka",
            specialties=specialties or [],
        )
    )
    if rating is not None:
        await service.update(created.id, CaretakerUpdate(rating=Decimal(rating)))
    if verified:
        await service.verify(created.id)
    return await service.get(created.id)


async def test_suspend_and_activate_emit_with_user_id(
    caretaker_service: CaretakerService, publisher: RecordingPublisher
) -> None:
    caretaker = await _caretaker(caretaker_service)

    await caretaker_service.suspend(caretaker.id)
    assert (await caretaker_service.get(caretaker.id)).status == CaretakerStatus.SUSPENDED
    await caretaker_service.activate(caretaker.id)
    assert (await caretaker_service.get(caretaker.id)).status == CaretakerStatus.ACTIVE

    assert publisher.last(Topic.CARETAKER_SUSPENDED) == {
        "caretaker_id": str(caretaker.id),
        "user_id": str(caretaker.user_id),
    }
    assert Topic.CARETAKER_ACTIVATED in publisher.topics()


async def test_search_only_active_and_best_rated_first(
    caretaker_service: CaretakerService,
) -> None:
    low = await _caretaker(caretaker_service, name="low", rating="3.1")
    high = await _caretaker(caretaker_service, name="high", rating="4.8")
    gone = await _caretaker(caretaker_service, name="gone", rating="5.0")
    await caretaker_service.suspend(gone.id)

    page = await caretaker_service.search(CaretakerSearchParams())

    assert [c.id for c in page.items] == [high.id, low.id]


async def test_search_by_specialty_overlap_and_min_rating(
    caretaker_service: CaretakerService,
) -> None:
    plumber = await _caretaker(
        caretaker_service, name="p", rating="4.0", specialties=["plumbing"]
    )
    await _caretaker(caretaker_service, name="e", rating="4.5", specialties=["electrical"])
    await _caretaker(caretaker_service, name="weak", rating="2.0", specialties=["plumbing"])

    page = await caretaker_service.search(
        CaretakerSearchParams(
            specialties=["plumbing", "painting"], min_rating=Decimal("4.0")
        )
    )

    assert [c.id for c in page.items] == [plumber.id]


async def test_verified_and_top_rated(caretaker_service: CaretakerService) -> None:
    await _caretaker(caretaker_service, name="unverified", rating="5.0")
    good = await _caretaker(caretaker_service, name="good", rating="4.9", verified=True)
    ok = await _caretaker(caretaker_service, name="ok", rating="4.0", verified=True)

    verified = await caretaker_service.list_verified(PaginationParams())
    top = await caretaker_service.top_rated(limit=1)

    assert {c.id for c in verified.items} == {good.id, ok.id}
    assert [c.id for c in top] == [good.id]


async def test_get_by_user(caretaker_service: CaretakerService) -> None:
    caretaker = await _caretaker(caretaker_service)
    assert (await caretaker_service.get_by_user(caretaker.user_id)).id == caretaker.id
