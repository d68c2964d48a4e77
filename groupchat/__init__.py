"""Initialize the Flask app and its extensions."""

import json
import os

import firebase_admin
from firebase_admin import credentials, firestore
from flask import Flask, current_app, g, session
from google.api_core.exceptions import GoogleAPIError
from werkzeug.middleware.proxy_fix import ProxyFix

from .constants import GROUP_PICTURE_POOL_SIZE, SESSION_USER_ID
from .extensions import cors
from .group.services import GroupService, GroupStore, LoggingChannelDirectory
from .user.services import ProfileDirectory


def _initialize_firebase(app):
    """Initialize the Firebase Admin SDK from the first credentials found."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    cred_info = json.load(f)
                project_id = cred_info.get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        cred = credentials.ApplicationDefault()
        project_id = os.environ.get("FIREBASE_PROJECT_ID")

    if not firebase_admin._apps:
        options = {"projectId": project_id} if project_id else None
        firebase_admin.initialize_app(cred, options)


def create_app(test_config=None, db=None):
    """Create and configure an instance of the Flask application.

    ``db`` is the Firestore client every service shares; when omitted the
    Firebase Admin SDK is initialized and its default client is used.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        CORS_ORIGIN=os.environ.get("CORS_ORIGIN") or "http://localhost:5173",
        GROUP_PICTURE_POOL_SIZE=int(
            os.environ.get("GROUP_PICTURE_POOL_SIZE") or GROUP_PICTURE_POOL_SIZE
        ),
    )

    if test_config:
        app.config.update(test_config)

    if db is None:
        if not app.config.get("TESTING"):
            _initialize_firebase(app)
        db = firestore.client()

    # Initialize extensions
    cors.init_app(
        app,
        origins=[app.config["CORS_ORIGIN"]],
        supports_credentials=True,
    )

    profiles = ProfileDirectory(db)
    app.extensions["profile_directory"] = profiles
    app.extensions["group_service"] = GroupService(
        GroupStore(db),
        profiles,
        channels=LoggingChannelDirectory(),
        picture_pool_size=app.config["GROUP_PICTURE_POOL_SIZE"],
    )

    # Register blueprints
    from . import group as group_bp

    app.register_blueprint(group_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.before_request
    def load_logged_in_user():
        """If a user_id is in the session, load the user from Firestore into g."""
        user_id = session.get(SESSION_USER_ID)
        g.user = None
        if user_id is None:
            return

        try:
            g.user = current_app.extensions["profile_directory"].get_user(user_id)
        except GoogleAPIError as e:
            current_app.logger.error(f"Error loading user from session: {e}")
            session.clear()
            return

        if g.user is None:
            # User ID in session but no user in DB. Clear the session.
            session.clear()
            current_app.logger.warning(
                f"User {user_id} in session but not found in Firestore."
            )

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
