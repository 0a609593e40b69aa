import random
import threading
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, render_template, request

from .config import Config, parse_seed
from .dictionary import load_default_dictionary
from .engine import GameEngine
from .messages import describe
from .scoring import SCORING_TITLE, scoring_legend
from .words import WordListRootWordSource, load_default_root_words


def _engine_from_config(config) -> GameEngine:
    seed = parse_seed(config.get("SEED"))
    rng = random.Random(seed) if seed is not None else None
    language = config.get("LANGUAGE", "en")
    dictionary = load_default_dictionary(language=language, path=config.get("DICTIONARY_PATH"))
    start_words = config.get("START_WORDS_PATH")
    if start_words:
        source = WordListRootWordSource.from_file(start_words, rng=rng)
    else:
        source = load_default_root_words(rng=rng)
    return GameEngine(
        dictionary,
        root_words=source,
        language=language,
        fallback_root_word=config.get("FALLBACK_ROOT_WORD", "silkworm"),
    )


def create_app(config_class=Config, engine: Optional[GameEngine] = None) -> Flask:
    package_root = Path(__file__).resolve().parent
    app = Flask(__name__, template_folder=str(package_root / "templates"))
    app.config.from_object(config_class)

    # Missing word lists or an unusable fallback abort startup here.
    if engine is None:
        engine = _engine_from_config(app.config)
    engine.start_new_round()
    print(f"[round] root={engine.root_word}")

    # The engine is single-threaded; every route goes through this lock.
    _engine_lock = threading.Lock()
    app.extensions["wordscramble.engine"] = engine

    @app.get("/")
    def index():
        with _engine_lock:
            state = engine.snapshot().to_dict()
        return render_template(
            "play.html",
            state=state,
            scoring_title=SCORING_TITLE,
            legend=scoring_legend(),
        )

    @app.get("/api/state")
    def api_state():
        with _engine_lock:
            return jsonify(engine.snapshot().to_dict())

    @app.post("/api/submit")
    def api_submit():
        data = request.get_json(silent=True) or {}
        word = data.get("word")
        if not isinstance(word, str):
            return jsonify({"error": "word is required"}), 400

        with _engine_lock:
            result = engine.submit(word)
            state = engine.snapshot().to_dict()
        print(f"[submit] word={result.word} result={result.kind.value} points={result.points}")

        text = describe(result)
        return jsonify({
            "result": result.kind.value,
            "word": result.word,
            "points": result.points,
            "title": text[0] if text else None,
            "message": text[1] if text else None,
            "state": state,
        })

    @app.post("/api/round/new")
    def api_new_round():
        with _engine_lock:
            engine.start_new_round()
            state = engine.snapshot().to_dict()
        print(f"[round] root={state['rootWord']}")
        return jsonify(state)

    @app.get("/api/scoring")
    def api_scoring():
        return jsonify({"title": SCORING_TITLE, "legend": scoring_legend()})

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="127.0.0.1", port=8765, debug=True)
