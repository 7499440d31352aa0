from adulting.db import db


class Like(db.Model):
    __tablename__ = "likes"

    username = db.Column(
        db.String(25),
        db.ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )


class Dislike(db.Model):
    __tablename__ = "dislikes"

    username = db.Column(
        db.String(25),
        db.ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )
