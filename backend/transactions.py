# backend/transactions.py

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from . import store
from .auth import current_identity
from .models import Filter, transaction_fields
from .queries import summarize

api_bp = Blueprint("api", __name__)


@api_bp.route("/transactions", methods=["GET"])
@jwt_required()
def list_transactions():
    user_id, _ = current_identity()
    f = Filter.from_args(request.args)
    rows = store.list_by_filter(user_id, f)
    return jsonify([t.to_dict() for t in rows])


@api_bp.route("/transactions", methods=["POST"])
@jwt_required()
def add_transaction():
    user_id, _ = current_identity()
    fields = transaction_fields(request.get_json(silent=True))
    tx = store.insert(user_id, fields)
    return jsonify(tx.to_dict()), 201


@api_bp.route("/transactions/<int:tx_id>", methods=["PUT"])
@jwt_required()
def update_transaction(tx_id):
    user_id, _ = current_identity()
    store.get(tx_id, user_id)  # 404 before payload errors
    fields = transaction_fields(request.get_json(silent=True))
    tx = store.update(tx_id, user_id, fields)
    return jsonify(tx.to_dict())


@api_bp.route("/transactions/<int:tx_id>", methods=["DELETE"])
@jwt_required()
def delete_transaction(tx_id):
    user_id, _ = current_identity()
    store.delete(tx_id, user_id)
    return jsonify({"success": True})


@api_bp.route("/summary", methods=["GET"])
@jwt_required()
def summary():
    user_id, _ = current_identity()
    f = Filter.from_args(request.args)
    return jsonify(summarize(user_id, f).to_dict())
