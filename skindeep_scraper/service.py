import os
import logging
from flask import Flask, request, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

from skindeep_scraper.scraper import search

load_dotenv()

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Optional shared secret; the API sends it as EWG_TOKEN
EWG_SERVICE_TOKEN = os.environ.get("EWG_SERVICE_TOKEN")

app = Flask(__name__)
CORS(app)


@app.route("/ewg-search", methods=["GET"])
def ewg_search():
    if EWG_SERVICE_TOKEN:
        auth = request.headers.get("Authorization", "")
        if auth != f"Bearer {EWG_SERVICE_TOKEN}":
            return jsonify({"error": "Unauthorized"}), 401

    ingredient = (request.args.get("ingredient") or "").strip()
    if not ingredient:
        return jsonify({"error": "Ingredient parameter is required"}), 400

    try:
        return jsonify(search(ingredient)), 200
    except Exception as e:
        logger.error("Error in EWG search for %s: %s", ingredient, e)
        return jsonify({
            "error": "Failed to fetch EWG data",
            "details": str(e)
        }), 500


if __name__ == "__main__":
    print("EWG search service running on http://localhost:5001 - endpoint GET /ewg-search")
    app.run(debug=True, port=5001)
