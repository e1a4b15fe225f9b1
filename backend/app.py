# backend/app.py

import os
import logging
from datetime import timedelta

from flask import Flask, jsonify
from flask_jwt_extended import JWTManager
from flask_cors import CORS

from . import db
from . import auth
from .errors import register_error_handlers
from .transactions import api_bp

# ---------------- Configuration ----------------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("finance-backend")

DEFAULT_CATEGORIES = {
    "income": ["Salary", "Freelance", "Investment", "Gift", "Other Income"],
    "expense": ["Food", "Transport", "Housing", "Entertainment", "Healthcare",
                "Shopping", "Utilities", "Other Expense"],
}

TOKEN_LIFETIME = timedelta(days=7)
DB_PATH = os.environ.get("DB_PATH", os.path.join(os.path.dirname(__file__), "..", "data", "finance.db"))


# ---------------- Flask App Factory ----------------
def create_app(config=None):
    app = Flask(__name__)

    # Configuration
    app.config['JWT_SECRET_KEY'] = os.environ.get('JWT_SECRET_KEY', "dev-key-change-me")
    app.config['JWT_ACCESS_TOKEN_EXPIRES'] = TOKEN_LIFETIME
    app.config['DB_PATH'] = DB_PATH
    if config:
        app.config.update(config)

    jwt = JWTManager(app)
    auth.register_jwt_callbacks(jwt)

    # CORS
    cors_origins = os.environ.get('CORS_ORIGINS', 'http://localhost:8501,http://localhost:8502')
    origins = [o.strip() for o in cors_origins.split(",") if o.strip()]
    CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)

    # Blueprints
    app.register_blueprint(auth.auth_bp, url_prefix='/auth')
    app.register_blueprint(api_bp, url_prefix='/api')
    register_error_handlers(app)

    # Initialize DB
    db.init_db(app.config['DB_PATH'])
    logger.info(f"Database initialized at {app.config['DB_PATH']}")

    # Teardown
    app.teardown_appcontext(db.close_db)

    # ---------------- Core Endpoints ----------------
    @app.route('/')
    def root():
        return jsonify({"msg": "Personal finance tracker backend"})

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    @app.route('/categories')
    def categories():
        return jsonify(DEFAULT_CATEGORIES)

    return app


# ---------------- Run ----------------
if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
