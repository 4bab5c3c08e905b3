from __future__ import annotations

from ..errors import DuplicateNameError, ValidationError
from ..storage.document_store import DocumentStore
from .resources import create_record, delete_record, get_record, list_records, update_record

STUDENTS_COLLECTION = "students"
STUDENT_FIELDS = ("name", "class", "email")


def _clean(value) -> str:
    return str(value or "").strip()


def _student_payload(name, class_name, email) -> dict:
    payload = {"name": _clean(name), "class": _clean(class_name), "email": _clean(email)}
    missing = [k for k in STUDENT_FIELDS if not payload[k]]
    if missing:
        raise ValidationError(f"Missing field(s): {', '.join(missing)}")
    return payload


def _name_taken(students: list[dict], name: str, exclude_id: str | None = None) -> bool:
    wanted = name.casefold()
    return any(
        _clean(s.get("name")).casefold() == wanted and s.get("id") != exclude_id
        for s in students
    )


def _sort_key(student: dict) -> str:
    return _clean(student.get("name")).casefold()


def _matches(student: dict, keyword: str, fields) -> bool:
    return any(keyword in _clean(student.get(f)).casefold() for f in fields)


def search_students(store: DocumentStore, keyword: str | None = None) -> list[dict]:
    """All students, or those whose name, class or email contains ``keyword``."""
    students = list_records(store, STUDENTS_COLLECTION)
    q = _clean(keyword).casefold()
    if q:
        students = [s for s in students if _matches(s, q, STUDENT_FIELDS)]
    return sorted(students, key=_sort_key)


def add_student(store: DocumentStore, name, class_name, email) -> dict:
    payload = _student_payload(name, class_name, email)
    if _name_taken(list_records(store, STUDENTS_COLLECTION), payload["name"]):
        raise DuplicateNameError("Student name is already in use.")
    return create_record(store, STUDENTS_COLLECTION, payload)


def update_student(store: DocumentStore, record_id: str, name, class_name, email) -> dict:
    payload = _student_payload(name, class_name, email)
    current = get_record(store, STUDENTS_COLLECTION, record_id)
    # a pure case change of the student's own name is not a conflict
    if _clean(current.get("name")).casefold() != payload["name"].casefold():
        if _name_taken(list_records(store, STUDENTS_COLLECTION), payload["name"], exclude_id=record_id):
            raise DuplicateNameError("New student name is already in use.")
    return update_record(store, STUDENTS_COLLECTION, record_id, payload)


def delete_student(store: DocumentStore, record_id: str) -> dict:
    return delete_record(store, STUDENTS_COLLECTION, record_id)


def grade_report(store: DocumentStore, keyword: str | None = None) -> dict:
    q = _clean(keyword)
    students = list_records(store, STUDENTS_COLLECTION)
    if q:
        students = [s for s in students if _matches(s, q.casefold(), ("name", "class"))]
    return {"keyword": q, "count": len(students), "students": students}
