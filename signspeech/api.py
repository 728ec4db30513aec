"""
Sign playback API endpoints.

REST endpoints for resolving words, translating text and controlling
playback of the avatar sequence.
"""

import logging

from flask import Blueprint, current_app, jsonify, request

from .translator import PlaybackConfig, get_letter_pose, get_sign

logger = logging.getLogger(__name__)

sign_api = Blueprint('sign_api', __name__)


def _translator():
    return current_app.extensions['sign_translator']


def _bad_request(message):
    return jsonify({'success': False, 'error': message}), 400


def _json_body():
    """Request body as a dict; None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


@sign_api.route('/words', methods=['GET'])
def list_words():
    """Known dictionary vocabulary."""
    words = _translator().get_available_signs()
    return jsonify({'success': True, 'words': words, 'count': len(words)})


@sign_api.route('/resolve/<word>', methods=['GET'])
def resolve_word(word):
    """Resolve a single word to its pose."""
    return jsonify({'success': True, 'pose': get_sign(word).to_dict()})


@sign_api.route('/letter/<letter>', methods=['GET'])
def resolve_letter(letter):
    if len(letter) != 1:
        return _bad_request('Expected a single letter')
    return jsonify({'success': True, 'pose': get_letter_pose(letter).to_dict()})


@sign_api.route('/translate', methods=['POST'])
def translate_text():
    """
    Resolve text and return the planned timeline without playing it.

    Request body:
        {'text': 'hello friend', 'speedMultiplier': 1.0, 'pauseDuration': 800}
    """
    data = _json_body()
    if data is None:
        return _bad_request('Expected a JSON object')
    text = data.get('text')
    if not isinstance(text, str):
        return _bad_request('Missing text')

    try:
        config = PlaybackConfig.from_mapping(data)
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))

    return jsonify({'success': True, 'result': _translator().translate(text, config)})


@sign_api.route('/play', methods=['POST'])
def play():
    """
    Start playback.

    Request body:
        {'text': 'hello friend'} or {'words': ['hello', 'friend']}
        plus optional 'speedMultiplier' and 'pauseDuration'

    Returns:
        {'success': True, 'started': False} when a sequence is already running
    """
    data = _json_body()
    if data is None:
        return _bad_request('Expected a JSON object')
    text = data.get('text')
    words = data.get('words')

    try:
        config = PlaybackConfig.from_mapping(data)
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))

    translator = _translator()
    if isinstance(text, str):
        started = translator.play_text(text, config)
    elif isinstance(words, list) and all(isinstance(w, str) for w in words):
        started = translator.sequencer.play(words, config)
    else:
        return _bad_request('Provide text or a list of words')

    return jsonify({'success': True, 'started': started,
                    'state': translator.sequencer.state.to_dict()})


@sign_api.route('/cancel', methods=['POST'])
def cancel():
    translator = _translator()
    translator.clear()
    return jsonify({'success': True, 'state': translator.sequencer.state.to_dict()})


@sign_api.route('/state', methods=['GET'])
def state():
    return jsonify({'success': True, 'state': _translator().sequencer.state.to_dict()})


@sign_api.route('/speech', methods=['POST'])
def speech():
    """
    Final transcript from the speech recognition client.

    Request body:
        {'transcript': 'hello there', 'play': false}
    """
    data = _json_body()
    if data is None:
        return _bad_request('Expected a JSON object')
    transcript = data.get('transcript')
    if not isinstance(transcript, str) or not transcript.strip():
        return _bad_request('Missing transcript')

    translator = _translator()
    translator.handle_final_transcript(transcript)

    started = False
    if data.get('play'):
        try:
            config = PlaybackConfig.from_mapping(data)
        except (TypeError, ValueError) as e:
            return _bad_request(str(e))
        started = translator.play_speech(config)

    return jsonify({'success': True, 'speech_text': translator.speech_text, 'started': started})


@sign_api.route('/transcript', methods=['GET'])
def transcript():
    return jsonify({'success': True, 'transcript': _translator().transcript})
