from flask import Flask, request, jsonify
import logging

import config
from cookbook import Cookbook, Failure, entry_from_json, entry_to_json
from handwriting import parse_handwriting
from summary import summarize

logger = logging.getLogger(__name__)


# =============================================================================
# ==== HTTP Endpoints =========================================================
# =============================================================================
app = Flask(__name__)
# errors go through unexpected_error even in debug and testing mode
app.config.update(HOST=config.HOST, PORT=config.PORT, DEBUG=config.DEBUG, PROPAGATE_EXCEPTIONS=False)

# Store your recipes here!
cookbook = Cookbook()


def failure_response(failure: Failure, status: int = 400):
	return jsonify({'error': failure.kind.value, 'msg': failure.message}), status


@app.errorhandler(500)
def unexpected_error(e):
	logger.error(
		'Unhandled error on %s %s', request.method, request.path,
		exc_info=getattr(e, 'original_exception', None) or e,
	)
	return jsonify({'error': 'internal', 'msg': 'something went wrong'}), 500


# [TASK 1] ====================================================================
@app.route("/parse", methods=['POST'])
def parse():
	data = request.get_json(silent=True)
	recipe_name = data.get('input', '') if isinstance(data, dict) else ''
	parsed_name = parse_handwriting(recipe_name)
	if parsed_name is None:
		return 'Invalid recipe name', 400
	return jsonify({'msg': parsed_name}), 200


# [TASK 2] ====================================================================
# Endpoint that adds a CookbookEntry to your magical cookbook
@app.route('/entry', methods=['POST'])
def create_entry():
	entry = entry_from_json(request.get_json(silent=True))
	if isinstance(entry, Failure):
		logger.warning('Bad entry payload: %s', entry.message)
		return failure_response(entry)

	result = cookbook.insert(entry)
	if isinstance(result, Failure):
		return failure_response(result)
	return jsonify({}), 200


@app.route('/entry', methods=['GET'])
def get_entry():
	name = request.args.get('name', type=str)
	if not name or len(name.strip()) == 0:
		return '', 400

	entry = cookbook.lookup(name)
	if isinstance(entry, Failure):
		return failure_response(entry, 404)
	return jsonify(entry_to_json(entry)), 200


# [TASK 3] ====================================================================
# Endpoint that returns a summary of a recipe that corresponds to a query name
@app.route('/summary', methods=['GET'])
def summary():
	name = request.args.get('name', type=str)
	if not name or len(name.strip()) == 0:
		return '', 400

	result = summarize(cookbook, name)
	if isinstance(result, Failure):
		return failure_response(result)
	return jsonify(result.to_json()), 200


if __name__ == '__main__':
	app.run(debug=app.config['DEBUG'], host=app.config['HOST'], port=app.config['PORT'])
