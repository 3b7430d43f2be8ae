import logging

from flask import Blueprint, current_app, jsonify, request

from models.student_schema import parse_student

logger = logging.getLogger(__name__)

student_bp = Blueprint("student", __name__)

GATEWAY_KEY = "student_gateway"


def _gateway():
    return current_app.extensions[GATEWAY_KEY]


def _student_from_body():
    # decoded whatever the Content-Type; a broken body comes back as None
    return parse_student(request.get_json(force=True, silent=True))


# -----------------------------
# Routes
# -----------------------------

# ✅ Register a new student
@student_bp.route("/register", methods=["POST"])
def register_student():
    student = _student_from_body()
    result = _gateway().insert(student)
    return jsonify(result), 200


# ✅ Single student by emailId
@student_bp.route("/student/<email_id>", methods=["GET"])
def get_student(email_id):
    return jsonify(_gateway().find_one(email_id)), 200


# ✅ All students
@student_bp.route("/students", methods=["GET"])
def get_all_students():
    return jsonify(_gateway().find_all()), 200


# ✅ Overwrite every field of the student stored under emailId
@student_bp.route("/update/<email_id>", methods=["PUT"])
def update_student_details(email_id):
    student = _student_from_body()
    if student.emailId != email_id:
        logger.info("Update renames student key %r -> %r", email_id, student.emailId)
    result = _gateway().update_one(email_id, student)
    return jsonify(result), 200


# ✅ Delete by emailId
@student_bp.route("/delete/<email_id>", methods=["DELETE"])
def delete_student(email_id):
    return jsonify(_gateway().delete_one(email_id)), 200
