"""Flask extensions for the application."""

from flask_cors import CORS

cors = CORS()
