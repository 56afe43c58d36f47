#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
qrengine - Flask Analyzer API
"""

import logging
from typing import Tuple

from flask import Flask, jsonify, request

from qrengine import QRCodeError, make_qr
from qrengine.config import DEFAULT_BORDER, MAX_BORDER, Settings, configure_logging
from qrengine.functional_areas import build_function_mask
from qrengine.qr_generator import evaluate_all_masks

settings = Settings.from_env()

# Configure logging
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = Flask(__name__)


def _read_params(req) -> Tuple[str, str, str, str, str, str, int]:
    """Extract and validate QR generation parameters from Flask request."""
    text = req.values.get('text') or ""
    ecc = (req.values.get('ecc') or "M").strip().upper()
    version = (req.values.get('version') or "auto").strip().lower()
    mode = (req.values.get('mode') or "auto").strip().lower()
    mask = (req.values.get('mask') or "auto").strip().lower()
    encoding = (req.values.get('encoding') or "utf-8").strip()

    try:
        border = int(req.values.get('border') or DEFAULT_BORDER)
        if border < 0 or border > MAX_BORDER:
            border = DEFAULT_BORDER
    except (ValueError, TypeError):
        border = DEFAULT_BORDER

    return text, ecc, version, mode, mask, encoding, border


def _bad_request(message: str):
    return jsonify({'error': message}), 400


def _check_text(text: str):
    if not text:
        return _bad_request("Missing 'text' parameter")
    if len(text) > settings.max_text_length:
        return _bad_request(f"'text' is longer than {settings.max_text_length} characters")
    return None


@app.errorhandler(QRCodeError)
def handle_qr_error(ex: QRCodeError):
    logger.warning(f"QR generation failed: {ex}")
    return _bad_request(str(ex))


@app.errorhandler(ValueError)
def handle_value_error(ex: ValueError):
    logger.warning(f"Invalid parameters: {ex}")
    return _bad_request(str(ex))


@app.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/encode', methods=['GET', 'POST'])
def encode_symbol():
    text, ecc, version, mode, mask, encoding, border = _read_params(request)
    invalid = _check_text(text)
    if invalid is not None:
        return invalid

    logger.info(f"Generating QR code with parameters: ecc={ecc}, version={version}, mode={mode}, mask={mask}")
    symbol = make_qr(text, ecc=ecc, version=version, mode=mode, mask=mask, encoding=encoding)
    logger.info(f"Successfully generated QR code version {symbol.version} (mask {symbol.mask})")

    dark = symbol.matrix.to_array()
    functional = build_function_mask(symbol.version)
    rows = symbol.to_matrix(margin=border)

    return jsonify({
        **symbol.info(),
        'size': symbol.size,
        'border': border,
        'encoding': encoding,
        'segments': [{'mode': seg.mode, 'length': len(seg.data)} for seg in symbol.segments],
        'codewords': list(symbol.codewords),
        'matrix': [''.join(str(v) for v in row) for row in rows],
        'metrics': {
            'modules': int(dark.size),
            'dark_modules': int(dark.sum()),
            'functional_modules': int(functional.sum()),
            'data_modules': int((~functional).sum()),
        },
    })


@app.route('/api/masks', methods=['GET', 'POST'])
def mask_scores():
    text, ecc, version, mode, _, encoding, _ = _read_params(request)
    invalid = _check_text(text)
    if invalid is not None:
        return invalid

    logger.info("Evaluating all mask patterns for optimization")
    best_mask, best_score, scores = evaluate_all_masks(
        text, ecc=ecc, version=version, mode=mode, encoding=encoding
    )
    logger.info(f"Best mask: {best_mask} (score: {best_score})")

    return jsonify({
        'best_mask': best_mask,
        'best_score': best_score,
        'scores': {str(k): v for k, v in sorted(scores.items())},
    })


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
