from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

# Loans are serialised after return_book commits their deletion.
db = SQLAlchemy(session_options={"expire_on_commit": False})
migrate = Migrate()
