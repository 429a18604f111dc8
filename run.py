import os

from pagesite import bootstrap, create_app

app = create_app()


def main():
    """Create tables on first start, then serve with the dev server."""
    bootstrap(app)
    port = int(os.environ.get("PORT", 5000))
    app.run(host=os.environ.get("HOST", "127.0.0.1"), port=port, debug=app.config["LOG_LEVEL"] == "DEBUG")


if __name__ == "__main__":
    main()
