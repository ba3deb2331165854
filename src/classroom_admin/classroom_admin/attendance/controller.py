from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.serialization import attendance_to_dict
from ..common.validators import require_mapping
from ..container import Container
from ..core.exceptions import ValidationError
from .session import AttendanceMarkingSession

SESSION_KEY = "attendance_sheet"


def register(app: Flask, container: Container) -> None:
    def _load_sheet():
        data = session.get(SESSION_KEY)
        return AttendanceMarkingSession.from_dict(data) if data else None

    def _store_sheet(sheet: AttendanceMarkingSession) -> None:
        session[SESSION_KEY] = sheet.to_dict()

    def _no_sheet():
        return jsonify({"success": False, "message": "Select a class to mark attendance"}), 400

    @app.route("/api/attendance/session", methods=["POST"], endpoint="attendance_start")
    def attendance_start():
        data = require_mapping(request.get_json(silent=True) or {})
        # Unknown or inactive classes raise NotFoundError (404).
        sheet = container.attendance_service.start_session(str(data.get("class_id") or ""))
        _store_sheet(sheet)
        return jsonify({"success": True, "sheet": container.attendance_service.get_sheet_ui(sheet)})

    @app.route("/api/attendance/session", methods=["GET"], endpoint="attendance_current")
    def attendance_current():
        sheet = _load_sheet()
        if not sheet:
            return _no_sheet()
        return jsonify({"success": True, "sheet": container.attendance_service.get_sheet_ui(sheet)})

    @app.route("/api/attendance/session/toggle", methods=["POST"], endpoint="attendance_toggle")
    def attendance_toggle():
        sheet = _load_sheet()
        if not sheet:
            return _no_sheet()
        data = require_mapping(request.get_json(silent=True) or {})
        container.attendance_service.toggle(sheet, str(data.get("student_id") or ""))
        _store_sheet(sheet)
        return jsonify({"success": True, "sheet": container.attendance_service.get_sheet_ui(sheet)})

    @app.route("/api/attendance/session/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        sheet = _load_sheet()
        if not sheet:
            return _no_sheet()
        try:
            records = container.attendance_service.save(sheet)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "records": [attendance_to_dict(r) for r in records]})

    @app.route("/api/attendance/session", methods=["DELETE"], endpoint="attendance_discard")
    def attendance_discard():
        session.pop(SESSION_KEY, None)
        return jsonify({"success": True})
