from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_date_key
from ..container import Container


def register(app: Flask, container: Container) -> None:
    views = container.view_service

    def _anchor():
        value = request.args.get("date")
        return parse_date_key(value) if value else now_local().date()

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        return jsonify(views.dashboard())

    @app.route("/api/week", methods=["GET"], endpoint="api_week")
    def api_week():
        return jsonify(views.week(_anchor()))

    @app.route("/api/month", methods=["GET"], endpoint="api_month")
    def api_month():
        return jsonify(views.month(_anchor()))

    @app.route("/api/report.csv", methods=["GET"], endpoint="api_report_csv")
    def api_report_csv():
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = parse_date_key(start_s) if start_s else None
        end = parse_date_key(end_s) if end_s else None
        rows = container.stats_service.report_rows(start=start, end=end)

        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=["date", "subject", "code", "status", "note", "holiday", "weight"],
        )
        writer.writeheader()
        for r in rows:
            writer.writerow({
                "date": r.date_key,
                "subject": r.subject_name,
                "code": r.subject_code,
                "status": "present" if r.attended else "absent",
                "note": r.note,
                "holiday": "yes" if r.holiday else "",
                "weight": r.weight,
            })

        csv_bytes = out.getvalue().encode("utf-8-sig")
        filename = f"attendance_term{container.term_service.current_term}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
