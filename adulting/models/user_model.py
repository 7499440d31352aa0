from adulting.db import db


class User(db.Model):
    __tablename__ = "users"

    username = db.Column(db.String(25), primary_key=True)
    password = db.Column(db.Text, nullable=False)
    first_name = db.Column(db.Text, nullable=False)
    last_name = db.Column(db.Text, nullable=False)
    email = db.Column(db.Text, nullable=False)
    bio = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)
