from flask import Blueprint, jsonify, request

from ..extensions import get_store
from ..services.students import grade_report

bp = Blueprint("reports_api", __name__)


@bp.get("/reports/grades")
def grades_report():
    return jsonify(grade_report(get_store(), request.args.get("keyword")))
