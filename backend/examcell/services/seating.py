from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
import logging
import math

from examcell.schemas.classroom import Classroom
from examcell.schemas.exam import SeatArrangement, StudentSeat
from examcell.schemas.planning import SeatingConflict

logger = logging.getLogger(__name__)


def grid_dimensions(capacity: int) -> tuple[int, int]:
    """Return ``(rows, columns)`` of the near-square grid for a room."""
    if capacity <= 0:
        return 0, 0
    columns = math.ceil(math.sqrt(capacity))
    rows = math.ceil(capacity / columns)
    return rows, columns


def unique_classrooms(classrooms: Iterable[Classroom]) -> list[Classroom]:
    """Drop repeated classroom ids, keeping the first occurrence."""
    unique: dict[str, Classroom] = {}
    for classroom in classrooms:
        unique.setdefault(classroom.id, classroom)
    return list(unique.values())


def seated_student_ids(arrangements: Iterable[SeatArrangement]) -> set[str]:
    return {seat.student_id for arrangement in arrangements for seat in arrangement.seats}


def unassigned_students(student_ids: Iterable[str], arrangements: Iterable[SeatArrangement]) -> list[str]:
    seated = seated_student_ids(arrangements)
    return [student_id for student_id in dict.fromkeys(student_ids) if student_id not in seated]


def auto_generate_seating(
    student_ids: Sequence[str],
    classrooms: Sequence[Classroom],
    existing_arrangements: Sequence[SeatArrangement] = (),
) -> list[SeatArrangement]:
    """Seat every student who has no seat yet, filling classrooms in order.

    Existing seats are kept as they are. New seats continue the room's seat
    numbering and fill its grid row by row. Students left over once every
    room is full stay unseated; see ``unassigned_students``.
    """
    classrooms = unique_classrooms(classrooms)
    # A room saved in several pieces keeps every piece, in saved order.
    existing_by_room: dict[str, list[StudentSeat]] = defaultdict(list)
    for arrangement in existing_arrangements:
        existing_by_room[arrangement.classroom_id].extend(arrangement.seats)
    queue = deque(unassigned_students(student_ids, existing_arrangements))

    arrangements: list[SeatArrangement] = []
    for classroom in classrooms:
        seats = list(existing_by_room.get(classroom.id, ()))
        assigned_count = len(seats)
        empty_seats = classroom.usable_capacity - assigned_count

        if empty_seats > 0 and queue:
            _, columns = grid_dimensions(classroom.usable_capacity)
            for index in range(min(empty_seats, len(queue))):
                position = index + assigned_count
                seats.append(
                    StudentSeat(
                        student_id=queue.popleft(),
                        seat_number=position + 1,
                        row=position // columns + 1,
                        column=position % columns + 1,
                    )
                )
        arrangements.append(SeatArrangement(classroom_id=classroom.id, seats=seats))

    listed = {classroom.id for classroom in classrooms}
    arrangements.extend(
        arrangement for arrangement in existing_arrangements if arrangement.classroom_id not in listed
    )

    if queue:
        logger.debug("%d student(s) left without a seat after filling %d classroom(s)", len(queue), len(classrooms))
    return arrangements


def find_student_seat(
    student_id: str,
    arrangements: Iterable[SeatArrangement],
) -> tuple[str, StudentSeat] | None:
    for arrangement in arrangements:
        for seat in arrangement.seats:
            if seat.student_id == student_id:
                return arrangement.classroom_id, seat
    return None


def find_seating_conflicts(arrangements: Iterable[SeatArrangement]) -> list[SeatingConflict]:
    conflicts: list[SeatingConflict] = []
    seen_students: dict[str, str] = {}

    for arrangement in arrangements:
        room_id = arrangement.classroom_id
        numbers: dict[int, str] = {}
        positions: dict[tuple[int, int], str] = {}
        for seat in arrangement.seats:
            holder = numbers.get(seat.seat_number)
            if holder is not None:
                conflicts.append(SeatingConflict(
                    id=f"num-{room_id}-{seat.seat_number}",
                    conflict_type="duplicate_seat_number",
                    description=f"Seat {seat.seat_number} in {room_id} assigned to {holder} and {seat.student_id}",
                    classroom_id=room_id,
                    student_ids=[holder, seat.student_id],
                ))
            else:
                numbers[seat.seat_number] = seat.student_id

            position = (seat.row, seat.column)
            holder = positions.get(position)
            if holder is not None:
                conflicts.append(SeatingConflict(
                    id=f"pos-{room_id}-{seat.row}-{seat.column}",
                    conflict_type="duplicate_position",
                    description=(
                        f"Row {seat.row}, column {seat.column} in {room_id} "
                        f"assigned to {holder} and {seat.student_id}"
                    ),
                    classroom_id=room_id,
                    student_ids=[holder, seat.student_id],
                ))
            else:
                positions[position] = seat.student_id

            first_room = seen_students.get(seat.student_id)
            if first_room is not None:
                conflicts.append(SeatingConflict(
                    id=f"stu-{seat.student_id}-{room_id}",
                    conflict_type="student_seated_twice",
                    description=f"Student {seat.student_id} seated in both {first_room} and {room_id}",
                    classroom_id=room_id,
                    student_ids=[seat.student_id],
                ))
            else:
                seen_students[seat.student_id] = room_id

    return conflicts
