from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _period(source) -> tuple:
        today = date.today()
        return source.get("year") or today.year, source.get("month") or today.month

    @app.route("/api/frequency", methods=["GET"], endpoint="weekly_frequency")
    def weekly_frequency():
        year, month = _period(request.args)
        weekday = request.args.get("weekday") or None
        professor = request.args.get("professor") or None
        try:
            svc = container.weekly_frequency_service
            classes = svc.monthly_report(year, month, weekday=weekday, professor=professor)
            stats = svc.statistics(year, month, weekday=weekday, professor=professor)
            return jsonify({"success": True, "classes": classes, "stats": asdict(stats)}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Failed to build weekly frequency report")
            return jsonify({"success": False, "message": "Erro interno ao carregar o relatório"}), 500

    @app.route("/api/frequency/<int:class_id>", methods=["POST"], endpoint="weekly_frequency_record")
    def weekly_frequency_record(class_id: int):
        payload = request.get_json(silent=True) or {}
        year, month = _period(payload)
        try:
            average = container.weekly_frequency_service.record_week(
                class_id=class_id,
                year=year,
                month=month,
                week=payload.get("week"),
                value=payload.get("present"),
            )
            return jsonify({"success": True, "frequencia_geral": average}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("Failed to record weekly frequency for class %s", class_id)
            return jsonify({"success": False, "message": "Erro interno ao salvar a frequência"}), 500
