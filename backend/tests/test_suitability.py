from examcell.models.faculty import SemesterPreference
from examcell.services.suitability import is_suitable, reference_semester, semester_parity


def test_semester_parity():
    assert semester_parity(1) == SemesterPreference.odd
    assert semester_parity(4) == SemesterPreference.even


def test_both_preference_is_always_suitable(make_faculty, make_exam, make_student):
    student = make_student(semester=2)
    faculty = make_faculty(preferred_semesters="both")
    exam = make_exam(student_ids=[student.id])

    assert is_suitable(faculty, exam, [student]) is True


def test_exam_without_students_is_suitable(make_faculty, make_exam, make_student):
    faculty = make_faculty(preferred_semesters="even")
    exam = make_exam()

    assert is_suitable(faculty, exam, [make_student()]) is True


def test_preference_must_match_reference_parity(make_faculty, make_exam, make_student):
    student = make_student(semester=3)
    exam = make_exam(student_ids=[student.id])

    assert is_suitable(make_faculty(preferred_semesters="odd"), exam, [student]) is True
    assert is_suitable(make_faculty(preferred_semesters="even"), exam, [student]) is False


def test_first_student_semester_heuristic_uses_registry_order(make_faculty, make_exam, make_student):
    even_student = make_student(semester=2)
    odd_students = [make_student(semester=1), make_student(semester=3)]
    # Exam order lists the odd students first; registry order decides.
    exam = make_exam(student_ids=[odd_students[0].id, odd_students[1].id, even_student.id])
    registry_order = [even_student, *odd_students]

    assert reference_semester(exam, registry_order) == 2
    assert is_suitable(make_faculty(preferred_semesters="even"), exam, registry_order) is True
    assert is_suitable(make_faculty(preferred_semesters="odd"), exam, registry_order) is False


def test_students_not_enrolled_are_ignored(make_exam, make_student):
    outsider = make_student(semester=2)
    enrolled = make_student(semester=5)
    exam = make_exam(student_ids=[enrolled.id])

    assert reference_semester(exam, [outsider, enrolled]) == 5
