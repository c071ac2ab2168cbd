# Backend for the OSRS hiscore proxy
# Serves a player's hiscore stats as JSON instead of Jagex's CSV.

import logging

from flask import Flask, Response, jsonify

from config import Config
from errors import HiscoreError
from stats_fetcher import fetch_player_stats

app = Flask(__name__)


@app.after_request
def add_cors_headers(response):
    # The hiscore is completely public, so any browser origin can use us
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Methods'] = 'GET'
    return response


@app.errorhandler(HiscoreError)
def handle_hiscore_error(error):
    # Only the status goes back to the client, the details stay in the logs
    error.log()
    return Response(status=error.status_code)


@app.route('/hiscore/<player_name>', methods=['GET'])
def get_hiscore(player_name):
    player = fetch_player_stats(player_name)
    return jsonify(player.to_dict())


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.DEBUG if Config.DEBUG else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    # threaded so a slow hiscore request doesn't hold up anyone else's
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, threaded=True)
