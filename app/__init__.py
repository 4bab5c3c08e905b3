from flask import Flask
from .config import Config
from .errors import register_error_handlers
from .extensions import cors, init_store


def create_app(config_class: type[Config] = Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config.update(overrides)
    app.json.sort_keys = False

    # Extensions
    cors.init_app(app)
    init_store(app)

    # Errors
    register_error_handlers(app)

    # Blueprints
    from .routes.resources_api import bp as resources_api
    from .routes.students_api import bp as students_api
    from .routes.reports_api import bp as reports_api
    from .routes.assistant_api import bp as assistant_api

    app.register_blueprint(resources_api, url_prefix="/api")
    app.register_blueprint(students_api, url_prefix="/api")
    app.register_blueprint(reports_api, url_prefix="/api")
    app.register_blueprint(assistant_api, url_prefix="/api")

    return app
