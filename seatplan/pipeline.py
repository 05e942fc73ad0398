"""High-level entry point for the bus seat planner.

``plan_seating`` runs a roster through the seating service and returns
a message for the user, the same way for every front-end (a UI, a
chat bot, tests). Errors become messages; nothing is raised for bad
input.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import get_config
from .domain.errors import (
    DuplicateSeatNumberError,
    EmptyRosterInputError,
    InvalidSeatNumberError,
    NoPassengersFoundError,
)
from .domain.models import SEAT_COUNT, PassengerRecord, PaymentStatus
from .seating.stats import rank_by_size
from .services.seating_service import SeatingService

EMPTY_INPUT_MESSAGE = "승객 정보를 입력해주세요."

NO_PASSENGERS_MESSAGE = """올바른 형식의 승객 정보를 찾을 수 없습니다.

예시 형식 (순서 무관):
1. 김진욱(입완, 양재, 1)
2. 나정선(사당, 예정, 3)
3. 박민수(5, 죽전, 입완)
4. 이영희(신갈, 미정, 예정) ← 좌석 미지정
5. 최철수(복정, 입완, 맘대로) ← 좌석 미지정
6. 정민수(양재, 입완) ← 좌석번호 생략

탑승지: 사당, 양재, 죽전, 신갈, 복정
좌석 미지정: 미정, 아무곳이나, 아무대나, 맘대로, 임의배정, ^^, ? 등
→ 미지정 시 뒷좌석부터 자동 임시 배정됩니다."""

EXAMPLE_ROSTER = """1. 김진욱(입완, 양재, 1)
2. 나정선(사당, 예정, 3)
3. 박민수(5, 죽전, 입완)
4. 이영희(신갈, 미정, 예정)
5. 최철수(복정, 입완, 맘대로)
6. 정민수(양재, 입완)
7. 강수진(죽전, 예정, 임의배정)
8. 홍길동(사당, 입완, 아무대나)"""

_STATUS_LABELS = {
    PaymentStatus.PAID: "입금완료",
    PaymentStatus.PENDING: "입금예정",
}


def plan_seating(text: Optional[str], service: Optional[SeatingService] = None) -> str:
    """Plan a roster and describe the outcome.

    Args:
        text: The pasted roster.
        service: Service to plan with; pass one in to keep its roster and
            colours between calls.

    Returns:
        A summary of the seating, or the reason the roster was rejected.
    """
    service = service if service is not None else SeatingService()

    try:
        roster = service.plan(text)
    except EmptyRosterInputError:
        return EMPTY_INPUT_MESSAGE
    except NoPassengersFoundError:
        return NO_PASSENGERS_MESSAGE
    except InvalidSeatNumberError as exc:
        seats = ", ".join(map(str, exc.offending_seats))
        return (
            f"잘못된 좌석 번호가 있습니다: {seats}\n"
            f"좌석 번호는 1-{SEAT_COUNT} 사이여야 합니다."
        )
    except DuplicateSeatNumberError as exc:
        seats = ", ".join(map(str, exc.offending_seats))
        return f"중복된 좌석 번호가 있습니다: {seats}"

    return format_summary(service, len(roster))


def format_summary(service: SeatingService, passenger_count: int) -> str:
    """Plain-text summary of the committed roster."""
    stats = service.statistics()
    header = f"{passenger_count}명의 승객 정보를 처리했습니다."
    if stats.temporary_assignments:
        header += f" (임시 배정: {stats.temporary_assignments}명)"

    lines = [header, ""]
    location_stats = service.location_stats()
    grouped = service.grouped_passengers()
    for location, members in rank_by_size(grouped):
        counts = location_stats[location]
        lines.append(
            f"[{location.value}] {counts.total}명 "
            f"(✓ {counts.paid}명 / ⏳ {counts.pending}명)"
        )
        lines.extend(f"  {_describe(record)}" for record in members)

    lines.append("")
    lines.append(
        f"총 승객 {stats.total}명 | 입금완료 {stats.paid} | 입금예정 {stats.pending}"
    )
    lines.append(
        f"좌석 {SEAT_COUNT}석 | 확정배정 {stats.confirmed_seats} | "
        f"임시배정 {stats.temporary_assignments} | "
        f"미배정 {stats.unassigned_passengers} | 빈 좌석 {stats.empty_seats}"
    )
    return "\n".join(lines)


def _describe(record: PassengerRecord) -> str:
    if record.seat_number is None:
        seat = "좌석 미지정"
    elif record.is_temporary_assignment:
        seat = f"{record.seat_number}번 (임시)"
    else:
        seat = f"{record.seat_number}번"
    return f"{seat} {record.name} - {_STATUS_LABELS[record.payment_status]}"


def run_pipeline() -> None:
    """Plan the example roster and print the result."""
    observability = get_config().observability
    logging.basicConfig(level=observability.level, format=observability.format)

    print("Roster:")
    print(EXAMPLE_ROSTER)
    print()
    print(plan_seating(EXAMPLE_ROSTER))


if __name__ == "__main__":
    run_pipeline()
