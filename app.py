"""Main entry point for the application."""

import os

from flask import jsonify

from groupchat import create_app

app = create_app()


@app.route("/api/test")
def health_check():
    """Perform a simple health check."""
    return jsonify(message="Server is working!"), 200


if __name__ == "__main__":
    port = int(os.environ.get("PORT") or 5001)
    app.run(debug=True, host="0.0.0.0", port=port)  # nosec
