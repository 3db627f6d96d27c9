"""Tests for snake->camel key mapping, typed decode and generic decode."""

import json

import pytest
from pydantic import ValidationError

from core.domain.models import CamelModel, GitHubUser
from core.domain.naming import snake_to_camel
from core.errors import DecodeError, DecodeErrorKind, NotAnObject
from core.services.json_decoding import convert_keys, decode_generic, decode_typed


class RepoStats(CamelModel):
    login: str
    public_repos: int


class TwoFactor(CamelModel):
    sha_2fa: str
    backup_codes_v2: int


class Owner(CamelModel):
    avatar_url: str


class Repo(CamelModel):
    full_name: str
    owner: Owner


@pytest.mark.parametrize(
    "key,expected",
    [
        ("public_repos", "publicRepos"),
        ("login", "login"),
        ("html_url", "htmlUrl"),
        ("received_events_url", "receivedEventsUrl"),
        ("node_ID", "nodeId"),
        ("a__b", "aB"),
        ("_private_key", "_privateKey"),
        ("trailing_", "trailing_"),
        ("___", "___"),
        ("", ""),
    ],
)
def test_snake_to_camel(key, expected):
    assert snake_to_camel(key) == expected


def test_convert_keys_is_recursive():
    value = {"full_name": "a/b", "owner": {"avatar_url": "x"}, "items": [{"node_id": 1}]}
    assert convert_keys(value) == {
        "fullName": "a/b",
        "owner": {"avatarUrl": "x"},
        "items": [{"nodeId": 1}],
    }


def test_decode_typed_round_trip_ignores_extra_fields(user_payload, user_bytes):
    user = decode_typed(GitHubUser, user_bytes)

    assert user.login == user_payload["login"]
    assert user.url == user_payload["url"]
    assert user.name == user_payload["name"]
    assert user.followers == user_payload["followers"]
    assert user.following == user_payload["following"]
    assert not hasattr(user, "bio")


def test_decode_typed_accepts_str_input(user_bytes):
    assert decode_typed(GitHubUser, user_bytes.decode("utf-8")).login == "insub4067"


def test_snake_case_payload_binds_camel_case_field():
    assert RepoStats.model_fields["public_repos"].alias == "publicRepos"

    stats = decode_typed(RepoStats, b'{"login": "insub4067", "public_repos": 66, "public_gists": 1}')
    assert stats.public_repos == 66


def test_nested_objects_are_mapped():
    repo = decode_typed(Repo, b'{"full_name": "a/b", "owner": {"avatar_url": "https://x"}}')
    assert repo.owner.avatar_url == "https://x"


def test_missing_followers_is_missing_field(user_payload):
    del user_payload["followers"]

    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, json.dumps(user_payload).encode())

    assert excinfo.value.kind is DecodeErrorKind.MISSING_FIELD
    assert excinfo.value.errors[0]["loc"] == ("followers",)


def test_wrong_type_is_type_mismatch(user_payload):
    user_payload["followers"] = "105"

    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, json.dumps(user_payload).encode())

    assert excinfo.value.kind is DecodeErrorKind.TYPE_MISMATCH


def test_null_name_is_type_mismatch(user_payload):
    user_payload["name"] = None

    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, json.dumps(user_payload).encode())

    assert excinfo.value.kind is DecodeErrorKind.TYPE_MISMATCH


def test_array_payload_is_schema_mismatch():
    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, b"[1, 2, 3]")

    assert excinfo.value.kind is DecodeErrorKind.SCHEMA_MISMATCH


def test_invalid_json_is_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, b"{not json")

    assert excinfo.value.kind is DecodeErrorKind.INVALID_JSON


def test_decoded_user_is_immutable(user_bytes):
    user = decode_typed(GitHubUser, user_bytes)

    with pytest.raises(ValidationError):
        user.followers = 0


def test_decode_generic_keeps_keys():
    payload = decode_generic(b'{"public_repos": 66, "hireable": null, "tags": ["a", 1, true]}')
    assert payload == {"public_repos": 66, "hireable": None, "tags": ["a", 1, True]}


@pytest.mark.parametrize("data", [b"[1,2,3]", b'"hello"', b"42", b"null", b"true"])
def test_decode_generic_rejects_non_objects(data):
    with pytest.raises(NotAnObject):
        decode_generic(data)


def test_decode_generic_invalid_json():
    with pytest.raises(DecodeError) as excinfo:
        decode_generic(b"")

    assert excinfo.value.kind is DecodeErrorKind.INVALID_JSON


def test_negative_counts_round_trip(user_payload):
    user_payload["followers"] = -1
    user_payload["following"] = -42

    user = decode_typed(GitHubUser, json.dumps(user_payload).encode())

    assert (user.followers, user.following) == (-1, -42)


def test_field_alias_matches_payload_key_transform():
    assert TwoFactor.model_fields["sha_2fa"].alias == snake_to_camel("sha_2fa")

    decoded = decode_typed(TwoFactor, b'{"sha_2fa": "x", "backup_codes_v2": 3}')

    assert decoded.sha_2fa == "x"
    assert decoded.backup_codes_v2 == 3


def test_integral_float_is_type_mismatch(user_payload):
    user_payload["followers"] = 105.0

    with pytest.raises(DecodeError) as excinfo:
        decode_typed(GitHubUser, json.dumps(user_payload).encode())

    assert excinfo.value.kind is DecodeErrorKind.TYPE_MISMATCH
