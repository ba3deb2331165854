from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import attendance_to_dict, class_to_dict, student_to_dict
from ..common.validators import require_mapping
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..dashboard.service import DashboardService
from .form import ClassForm


def register(app: Flask, container: Container) -> None:
    def _require_class(class_id: str):
        session = container.manager.get_class(class_id)
        if not session:
            raise NotFoundError("Class not found")
        return session

    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    def classes_list():
        return jsonify([DashboardService.class_row_ui(c) for c in container.manager.classes])

    @app.route("/api/classes/active", methods=["GET"], endpoint="classes_active")
    def classes_active():
        return jsonify([class_to_dict(c) for c in container.attendance_service.list_selectable_classes()])

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    def classes_create():
        data = require_mapping(request.get_json(silent=True) or {})
        try:
            form = ClassForm.from_payload(data)
            session = container.manager.add_class(form.build())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "class": class_to_dict(session)}), 201

    @app.route("/api/classes/<class_id>/students", methods=["GET"], endpoint="classes_students")
    def classes_students(class_id: str):
        _require_class(class_id)
        return jsonify([student_to_dict(s) for s in container.manager.get_students_for_class(class_id)])

    @app.route("/api/classes/<class_id>/enroll", methods=["POST"], endpoint="classes_enroll")
    def classes_enroll(class_id: str):
        _require_class(class_id)
        data = require_mapping(request.get_json(silent=True) or {})
        student_id = str(data.get("student_id") or "")
        if not student_id:
            return jsonify({"success": False, "message": "student_id is required"}), 400
        changed = container.manager.enroll_student(student_id, class_id)
        return jsonify({"success": True, "changed": changed, "class": class_to_dict(_require_class(class_id))})

    @app.route("/api/classes/<class_id>/attendance", methods=["GET"], endpoint="classes_attendance")
    def classes_attendance(class_id: str):
        _require_class(class_id)
        return jsonify([attendance_to_dict(r) for r in container.manager.attendance_for_class(class_id)])
