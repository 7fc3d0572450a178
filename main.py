"""Local/WSGI entrypoint exposing ``app`` for hosts that look for it in main.py."""

from bingo_board import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
