from __future__ import annotations

from flask import Flask, jsonify

from ..catalog.subjects import list_groups, subjects_for
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        return jsonify(container.dashboard_service.get_dashboard_ui())

    @app.route("/api/catalog/groups", methods=["GET"], endpoint="catalog_groups")
    def catalog_groups():
        return jsonify(list_groups())

    @app.route("/api/catalog/groups/<group>/subjects", methods=["GET"], endpoint="catalog_subjects")
    def catalog_subjects(group: str):
        return jsonify(subjects_for(group))
