from flask import Blueprint, request, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from adulting.db import db
from adulting.errors import BadRequestError
from adulting.repositories import post_repository
from adulting.schemas import load_or_400
from adulting.schemas.post_schema import CommentCreateSchema, PostCreateSchema


post_bp = Blueprint("posts", __name__)


@post_bp.route("", methods=["POST"])
@jwt_required()
def create_post():
    username = get_jwt_identity()
    data = load_or_400(PostCreateSchema(), request.get_json(silent=True))

    post = post_repository.create(db.session, username, **data)
    return jsonify({"post": post}), 201


@post_bp.route("/recommendations", methods=["GET"])
@jwt_required()
def recommendations():
    post_type = request.args.get("type", "").strip()
    if not post_type:
        raise BadRequestError("Query parameter 'type' is required")

    usernames = post_repository.get_recommendations(
        db.session, get_jwt_identity(), post_type
    )
    return jsonify({"recommendations": usernames}), 200


@post_bp.route("/<int:post_id>", methods=["GET"])
@jwt_required()
def get_post(post_id):
    post = post_repository.get(db.session, post_id)
    return jsonify({"post": post}), 200


@post_bp.route("/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    post_repository.remove(db.session, post_id, get_jwt_identity())
    return jsonify({"deleted": post_id}), 200


@post_bp.route("/<int:post_id>/like", methods=["POST"])
@jwt_required()
def like_post(post_id):
    like = post_repository.like(db.session, post_id, get_jwt_identity())
    return jsonify({"like": like}), 201


@post_bp.route("/<int:post_id>/like", methods=["DELETE"])
@jwt_required()
def unlike_post(post_id):
    like = post_repository.unlike(db.session, post_id, get_jwt_identity())
    return jsonify({"unliked": like}), 200


@post_bp.route("/<int:post_id>/dislike", methods=["POST"])
@jwt_required()
def dislike_post(post_id):
    dislike = post_repository.dislike(db.session, post_id, get_jwt_identity())
    return jsonify({"dislike": dislike}), 201


@post_bp.route("/<int:post_id>/dislike", methods=["DELETE"])
@jwt_required()
def undislike_post(post_id):
    dislike = post_repository.undislike(db.session, post_id, get_jwt_identity())
    return jsonify({"undisliked": dislike}), 200


@post_bp.route("/<int:post_id>/comments", methods=["GET"])
@jwt_required()
def list_comments(post_id):
    comments = post_repository.get_comments(db.session, post_id)
    return jsonify({"comments": comments}), 200


@post_bp.route("/<int:post_id>/comments", methods=["POST"])
@jwt_required()
def create_comment(post_id):
    data = load_or_400(CommentCreateSchema(), request.get_json(silent=True))

    comment = post_repository.add_comment(
        db.session, post_id, get_jwt_identity(), data["text"]
    )
    return jsonify({"comment": comment}), 201
