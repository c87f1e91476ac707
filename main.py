from flask import Flask, request, jsonify
from flask_cors import CORS
from theater import StatementCalculator
from theater.processor import error_response
import os
import logging

# Configure logging
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes
CORS(app)

# Initialize the statement calculator
calculator = StatementCalculator()


@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": "Theater Statement API",
        "version": "1.0",
        "endpoints": {
            "statement": "/statement [POST]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/statement", methods=["POST"])
def statement():
    """
    Calculate the billing statement for an invoice
    """
    try:
        input_data = request.get_json(force=True, silent=True)

        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        customer = input_data.get("invoice", {}).get("customer", "Unknown")
        logger.info(f"Calculating statement for: {customer}")

        result = calculator.process_from_dict(input_data)

        logger.info(f"Statement calculated successfully: {customer}")

        return jsonify(result), 200

    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error(f"Validation error: {str(e)}")
        return jsonify(error_response(e)), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


@app.route("/process", methods=["POST"])
def process_legacy():
    """Legacy endpoint - redirects to /statement"""
    return statement()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=False)
