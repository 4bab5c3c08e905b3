from flask import Blueprint, current_app, jsonify, request

from ..extensions import get_store
from ..services.students import add_student, delete_student, search_students, update_student

bp = Blueprint("students_api", __name__)


def _student_fields() -> tuple:
    """Read name/class/email from a JSON body or a submitted form."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form
    return data.get("name"), data.get("class"), data.get("email")


@bp.get("/students")
def list_students():
    return jsonify(search_students(get_store(), request.args.get("q")))


@bp.post("/students")
def create_student():
    name, class_name, email = _student_fields()
    student = add_student(get_store(), name, class_name, email)
    current_app.logger.info("Added student %s (%s)", student["name"], student["id"])
    return jsonify(student), 201


@bp.put("/students/<record_id>")
def edit_student(record_id):
    name, class_name, email = _student_fields()
    return jsonify(update_student(get_store(), record_id, name, class_name, email))


@bp.delete("/students/<record_id>")
def remove_student(record_id):
    result = delete_student(get_store(), record_id)
    current_app.logger.info("Deleted student %s", record_id)
    return jsonify(result)
