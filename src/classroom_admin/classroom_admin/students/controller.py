from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import student_to_dict
from ..common.validators import require_mapping
from ..container import Container
from ..core.exceptions import ValidationError
from .form import StudentForm


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        return jsonify([student_to_dict(s) for s in container.manager.students])

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    def students_create():
        data = require_mapping(request.get_json(silent=True) or {})
        try:
            form = StudentForm.from_payload(data)
            student = container.manager.add_student(form.build())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "student": student_to_dict(student)}), 201
