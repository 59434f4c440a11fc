from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _error(e: Exception):
        status = 404 if isinstance(e, NotFoundError) else 400
        return jsonify({"success": False, "message": str(e)}), status

    @app.route("/api/classes/<int:class_id>/attendance", methods=["GET"], endpoint="class_attendance_grid")
    def class_attendance_grid(class_id: int):
        try:
            grid = container.attendance_service.attendance_grid(class_id)
            return jsonify({"success": True, **asdict(grid)}), 200
        except (ValidationError, NotFoundError) as e:
            return _error(e)
        except Exception:
            app.logger.exception("Failed to build attendance grid for class %s", class_id)
            return jsonify({"success": False, "message": "Erro interno ao carregar a frequência"}), 500

    @app.route("/api/classes/<int:class_id>/attendance", methods=["POST"], endpoint="class_attendance_mark")
    def class_attendance_mark(class_id: int):
        payload = request.get_json(silent=True) or {}
        try:
            container.attendance_service.mark(
                class_id=class_id,
                student_id=payload.get("student_id"),
                class_date=payload.get("date"),
                status=payload.get("status"),
            )
            percentage = container.attendance_service.student_percentage(class_id, int(payload["student_id"]))
            return jsonify({"success": True, "percentage": percentage}), 200
        except (ValidationError, NotFoundError) as e:
            return _error(e)
        except Exception:
            app.logger.exception("Failed to mark attendance for class %s", class_id)
            return jsonify({"success": False, "message": "Erro interno ao salvar a presença"}), 500

    @app.route("/api/classes/<int:class_id>/finish", methods=["POST"], endpoint="class_finish")
    def class_finish(class_id: int):
        try:
            container.attendance_service.finish_class(class_id)
            return jsonify({"success": True}), 200
        except (ValidationError, NotFoundError) as e:
            return _error(e)
        except Exception:
            app.logger.exception("Failed to finish class %s", class_id)
            return jsonify({"success": False, "message": "Erro interno ao finalizar a turma"}), 500
