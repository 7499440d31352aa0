from adulting.db import db


class Follow(db.Model):
    __tablename__ = "follows"

    user_following_id = db.Column(
        db.String(25),
        db.ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )
    user_being_followed_id = db.Column(
        db.String(25),
        db.ForeignKey("users.username", ondelete="CASCADE"),
        primary_key=True,
    )

    __table_args__ = (
        db.CheckConstraint(
            "user_following_id <> user_being_followed_id",
            name="no_self_follow",
        ),
    )
