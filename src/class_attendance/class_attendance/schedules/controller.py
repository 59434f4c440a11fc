from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import iso
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/dates", methods=["GET"], endpoint="class_dates")
    def class_dates(class_id: int):
        try:
            dates = container.schedule_service.class_dates(class_id)
            return jsonify({"success": True, "dates": [iso(d) for d in dates]}), 200
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("Failed to list dates for class %s", class_id)
            return jsonify({"success": False, "message": "Erro interno ao gerar as datas"}), 500

    @app.route("/api/contracts/dates", methods=["GET"], endpoint="contract_dates")
    def contract_dates():
        try:
            courses = container.schedule_service.contract_course_dates(request.args.getlist("class_id"))
            return jsonify({"success": True, "courses": courses}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            app.logger.exception("Failed to build contract course dates")
            return jsonify({"success": False, "message": "Erro interno ao gerar o contrato"}), 500
