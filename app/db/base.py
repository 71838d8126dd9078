from sqlalchemy.orm import declarative_base

Base = declarative_base()

# All models must import Base from this module; app.db.models registers them
