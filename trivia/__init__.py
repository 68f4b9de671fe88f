from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
import click
from trivia.config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
login_manager = LoginManager()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=flask_app.config.get('CORS_ORIGINS', []))

    # Import and register blueprints here
    from trivia.main import main
    flask_app.register_blueprint(main)

    from trivia.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix='/api/auth')

    from trivia.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api')

    from trivia.api.stats import stats
    flask_app.register_blueprint(stats, url_prefix='/api')

    from trivia.api.doc import doc
    flask_app.register_blueprint(doc, url_prefix='/api')

    from trivia.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Flask-Login resolves the user from the session cookie on every request
    from trivia.services import sessions

    @login_manager.request_loader
    def load_user_from_request(request):
        token = request.cookies.get(flask_app.config['GAME_SESSION_COOKIE'])
        return sessions.resolve(token)

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Unauthorized'}), 401

    @click.command('seed')
    def seed_command():
        """Inserts the bundled categories and questions (idempotent)."""
        from trivia.seed import seed_questions
        with flask_app.app_context():
            for name, created in seed_questions():
                if created:
                    click.echo(f'Seeded "{name}" with {created} questions.')
                else:
                    click.echo(f'Category "{name}" already exists, skipping.')
        click.echo('Done.')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from trivia.seed import seed_questions
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            seeded = sum(created for _, created in seed_questions())
            click.echo(f'Database has been reset and seeded with {seeded} questions!')

    flask_app.cli.add_command(seed_command)
    flask_app.cli.add_command(db_reset_command)

    return flask_app
