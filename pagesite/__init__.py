from flask import Flask, render_template
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

def create_app(test_config: dict | None = None):
    """Factory to create and configure the Flask application."""
    from .config import load_config
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.update(load_config())
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)

    @app.after_request
    def set_security_headers(resp):
        """Set security-related HTTP headers on each response."""
        resp.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "object-src 'none'; "
            "frame-ancestors 'none'"
        )
        resp.headers["Referrer-Policy"] = "no-referrer"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        return resp

    @app.errorhandler(404)
    def not_found(e):
        """Custom 404 page."""
        return render_template("404.html", title="Not Found"), 404

    @app.errorhandler(500)
    def server_error(e):
        """Custom 500 page. Flask has already logged the exception."""
        return render_template("500.html", title="Server Error"), 500

    @app.context_processor
    def expose_site():
        """Expose site name and version to templates."""
        return {"SITE": {"name": app.config["SITE_NAME"], "version": app.config["APP_VERSION"]}}

    @app.cli.command("init-db")
    def init_db_command():
        """Create tables and seed the welcome post."""
        bootstrap(app)

    from .routes.main import bp as main_bp
    app.register_blueprint(main_bp)

    return app


def bootstrap(app):
    """Create tables and seed a welcome post if there are none."""
    from .models import Post
    with app.app_context():
        db.create_all()
        if app.config.get("SEED_SAMPLE_POST") and Post.query.first() is None:
            post = Post(
                title="Hello",
                body="This is the first post. Edit or remove it from the database.",
            )
            db.session.add(post)
            db.session.commit()
            app.logger.info("Seeded welcome post id=%s", post.id)
