from adulting.models.comment_model import Comment
from adulting.models.follow_model import Follow
from adulting.models.post_model import Post
from adulting.models.reaction_model import Dislike, Like
from adulting.models.user_model import User

__all__ = ["Comment", "Dislike", "Follow", "Like", "Post", "User"]
