from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from adulting.db import db
from adulting.repositories import user_repository
from adulting.schemas import load_or_400
from adulting.schemas.user_schema import FollowSchema, UserUpdateSchema
from adulting.utils.auth import ensure_same_user


user_bp = Blueprint("users", __name__)


@user_bp.route("/<username>", methods=["GET"])
@jwt_required()
def get_user(username):
    user = user_repository.get(db.session, username)
    return jsonify({"user": user}), 200


@user_bp.route("/<username>", methods=["PATCH"])
@ensure_same_user
def update_user(username):
    data = load_or_400(UserUpdateSchema(), request.get_json(silent=True))

    user = user_repository.update(db.session, username, data)
    return jsonify({"user": user}), 200


@user_bp.route("/<username>", methods=["DELETE"])
@ensure_same_user
def delete_user(username):
    user_repository.remove(db.session, username)
    return jsonify({"deleted": username}), 200


@user_bp.route("/<username>/posts", methods=["GET"])
@jwt_required()
def list_user_posts(username):
    posts = user_repository.user_posts(db.session, username)
    return jsonify({"posts": posts}), 200


@user_bp.route("/<username>/likes", methods=["GET"])
@jwt_required()
def list_user_likes(username):
    likes = user_repository.user_likes(db.session, username)
    return jsonify({"likes": likes}), 200


@user_bp.route("/<username>/dislikes", methods=["GET"])
@jwt_required()
def list_user_dislikes(username):
    dislikes = user_repository.user_dislikes(db.session, username)
    return jsonify({"dislikes": dislikes}), 200


@user_bp.route("/<username>/post-types", methods=["GET"])
@jwt_required()
def list_post_types(username):
    types = user_repository.get_frequent_post_types(db.session, username)
    return jsonify({"types": types}), 200


@user_bp.route("/<username>/followers", methods=["GET"])
@jwt_required()
def list_followers(username):
    followers = user_repository.get_followers(db.session, username)
    return jsonify({"followers": sorted(followers)}), 200


@user_bp.route("/<username>/following", methods=["GET"])
@jwt_required()
def list_following(username):
    following = user_repository.get_following(db.session, username)
    return jsonify({"following": sorted(following)}), 200


@user_bp.route("/<username>/follow", methods=["POST"])
@ensure_same_user
def follow_user(username):
    data = load_or_400(FollowSchema(), request.get_json(silent=True))

    follow = user_repository.add_follow(db.session, username, data["username"])
    return jsonify({"follow": follow}), 201


@user_bp.route("/<username>/follow", methods=["DELETE"])
@ensure_same_user
def unfollow_user(username):
    data = load_or_400(FollowSchema(), request.get_json(silent=True))

    follow = user_repository.remove_follow(db.session, username, data["username"])
    return jsonify({"unfollowed": follow}), 200
