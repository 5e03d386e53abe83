# app.py
import logging
import math

from flask import Flask, current_app, jsonify, request
from flask.logging import default_handler

import console
from config import DefaultConfig
from frontdesk import FrontDesk
from models import ErrorKind, Result

ERROR_STATUS = {
    ErrorKind.GUEST_NOT_FOUND: 404,
    ErrorKind.ROOM_NOT_FOUND: 404,
    ErrorKind.ALREADY_RESERVED: 409,
    ErrorKind.ROOM_NOT_RESERVED: 409,
    ErrorKind.INVALID_AMOUNT: 400,
}


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    if test_config is not None:
        app.config.from_mapping(test_config)
    else:
        app.config.from_prefixed_env()

    level = app.config["LOG_LEVEL"]
    app.logger.setLevel(level)
    desk_logger = logging.getLogger("frontdesk")
    desk_logger.setLevel(level)
    if default_handler not in desk_logger.handlers:
        desk_logger.addHandler(default_handler)

    # One front desk per application; nothing is shared between apps
    app.extensions["frontdesk"] = FrontDesk.from_inventory(app.config["ROOM_INVENTORY"])
    app.logger.info("front desk ready with %d rooms", len(app.config["ROOM_INVENTORY"]))

    register_routes(app)
    console.init_app(app)
    return app


def get_desk() -> FrontDesk:
    return current_app.extensions["frontdesk"]


def error_response(result: Result):
    return jsonify({"error": result.error.value, "message": result.message}), ERROR_STATUS[result.error]


def bad_request(message: str):
    return jsonify({"error": "bad_request", "message": message}), 400


def room_payload(room):
    payload = room.to_dict()
    payload["features"] = room.describe()
    return payload


def register_routes(app: Flask):

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": e.description}), 404

    @app.route("/api/guests", methods=["GET", "POST"])
    def api_guests():
        desk = get_desk()
        if request.method == "GET":
            return jsonify([g.to_dict() for g in desk.guests()])

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return bad_request("guest data must be a JSON object")
        name = data.get("name") or ""
        phone = data.get("phone") or ""
        if not isinstance(name, str) or not isinstance(phone, str):
            return bad_request("name and phone must be strings")
        result = desk.register_guest(name.strip(), phone.strip())
        return jsonify(result.value.to_dict()), 201

    @app.route("/api/guests/<int:guest_id>", methods=["GET"])
    def api_guest(guest_id):
        result = get_desk().find_guest(guest_id)
        if not result.ok:
            return error_response(result)
        return jsonify(result.value.to_dict())

    @app.route("/api/rooms", methods=["GET"])
    def api_rooms():
        return jsonify([r.to_dict() for r in get_desk().rooms()])

    @app.route("/api/rooms/available", methods=["GET"])
    def api_available():
        result = get_desk().list_available_rooms()
        return jsonify([room_payload(room) for room, _ in result.value])

    @app.route("/api/rooms/<int:rno>", methods=["GET"])
    def api_room(rno):
        result = get_desk().find_room(rno)
        if not result.ok:
            return error_response(result)
        return jsonify(room_payload(result.value))

    @app.route("/api/reservations", methods=["POST"])
    def api_reserve():
        data = request.get_json(silent=True) or {}
        try:
            guest_id = int(data["guest_id"])
            rno = int(data["room_id"])
        except (KeyError, TypeError, ValueError):
            return bad_request("guest_id and room_id must be integers")

        result = get_desk().reserve_room(guest_id, rno)
        if not result.ok:
            return error_response(result)
        return jsonify(room_payload(result.value)), 201

    @app.route("/api/reservations/<int:rno>", methods=["DELETE"])
    def api_cancel(rno):
        result = get_desk().cancel_reservation(rno)
        if not result.ok:
            return error_response(result)
        return jsonify({"room_number": rno, "cancelled": result.value, "message": result.message})

    @app.route("/api/rooms/<int:rno>/room-service", methods=["POST"])
    def api_room_service(rno):
        data = request.get_json(silent=True) or {}
        try:
            amount = float(data["amount"])
        except (KeyError, TypeError, ValueError):
            return bad_request("amount must be a number")
        if not math.isfinite(amount):
            return bad_request("amount must be a finite number")

        desk = get_desk()
        result = desk.add_room_service(rno, amount)
        if not result.ok:
            return error_response(result)
        room = desk.find_room(rno).value
        return jsonify({"room_number": rno, "room_service": result.value, "total_due": room.total_due()})

    @app.route("/api/rooms/<int:rno>/bill", methods=["GET"])
    def api_bill(rno):
        desk = get_desk()
        result = desk.view_bill(rno)
        if not result.ok:
            return error_response(result)
        room = desk.find_room(rno).value
        return jsonify({
            "room_number": rno,
            "base_price": room.base_price,
            "room_service": room.room_service,
            "total_due": result.value,
        })


if __name__ == "__main__":
    create_app().run(debug=True)
