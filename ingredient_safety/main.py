import logging
from flask import Flask, request, jsonify
from flask_cors import CORS

from ingredient_safety import config
from ingredient_safety.analyzer import analyze_ingredients
from ingredient_safety.health_faq import find_best_match
from ingredient_safety.ocr import extract_ingredients

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def _as_ingredient_text(value):
    if isinstance(value, list):
        return ", ".join(str(v) for v in value if v is not None)
    if isinstance(value, str):
        return value
    return None


def _analysis_response(text):
    records = analyze_ingredients(text)
    return {"count": len(records), "results": [r.to_json() for r in records]}


@app.route('/analyze', methods=['POST'])
def analyze():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    raw = data.get('ingredients', data.get('text'))
    text = _as_ingredient_text(raw)

    if text is None:
        return jsonify({"error": "Missing 'ingredients' in request body"}), 400

    # An empty list is a valid request with an empty answer
    return jsonify(_analysis_response(text)), 200


@app.route('/extract_text', methods=['POST'])
def extract_text():
    upload = request.files.get('image')
    if upload is None or not upload.filename:
        return jsonify({"error": "No image provided"}), 400

    try:
        extracted = extract_ingredients(upload.stream)
    except Exception as e:
        logger.error("Error extracting text: %s", e)
        return jsonify({"error": f"Error processing image: {str(e)}"}), 500

    response = dict(extracted)
    if (request.form.get('analyze') or "").strip().lower() in {"1", "true", "yes", "on"}:
        response.update(_analysis_response(extracted["text"]))
    return jsonify(response), 200


@app.route('/health_question', methods=['POST'])
def health_question():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    question = (data.get('question') or "").strip()
    if not question:
        return jsonify({"error": "Missing 'question' in request body"}), 400
    return jsonify(find_best_match(question)), 200


@app.route('/healthz', methods=['GET'])
def healthz():
    return jsonify({"status": "ok"}), 200


if __name__ == '__main__':
    print("Ingredient safety API running on http://localhost:5000")
    app.run(debug=True, port=5000)
