from flask import Flask

GREETING = "Flask App running on ECS Fargate 🚀"


def create_app() -> Flask:
    app = Flask(__name__)

    @app.route("/")
    def hello():
        return GREETING, 200, {"Content-Type": "text/plain; charset=utf-8"}

    return app
