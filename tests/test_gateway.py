"""Persistence gateway lifecycle and the per-record CRUD contract."""
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from unova.db import PersistenceGateway
from unova.models.conversation import Message, MessageRole
from unova.services.conversation_service import ConversationService, conversation_preview, derive_title
from unova.services.document_service import ResearchNoteService, SpeechService
from unova.services.user_service import UserService, hash_password, verify_password


@pytest.fixture
def user(gateway):
    with gateway.session() as session:
        return UserService(session).create(
            {"username": "delegate", "email": "delegate@example.com", "password": hash_password("pw123456")}
        )


def test_gateway_lifecycle(settings):
    gateway = PersistenceGateway(settings.database_url)
    assert not gateway.is_open
    with pytest.raises(RuntimeError):
        gateway.engine
    gateway.open()
    assert gateway.is_open
    gateway.close()
    gateway.close()
    assert not gateway.is_open


def test_user_lookups(gateway):
    with gateway.session() as session:
        users = UserService(session)
        created = users.create({
            "username": "g-user",
            "email": "g@example.com",
            "password": hash_password("pw123456"),
            "google_id": "google-123",
        })
        assert created.name is None
        assert users.get(created.id).username == "g-user"
        assert users.get_by_username("g-user").id == created.id
        assert users.get_by_email("g@example.com").id == created.id
        assert users.get_by_google_id("google-123").id == created.id
        assert users.get_by_google_id("nope") is None
        assert users.update(created.id, {"name": "G"}).name == "G"
        assert users.update(424242, {"name": "ghost"}) is None


def test_user_uniqueness_enforced(gateway, user):
    with gateway.session() as session:
        with pytest.raises(IntegrityError):
            UserService(session).create({"username": "delegate", "email": "new@example.com", "password": "x"})


def test_passwords_are_hashed():
    hashed = hash_password("pw123456")
    assert hashed != "pw123456"
    assert verify_password("pw123456", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("pw123456", "not-a-bcrypt-hash")


def test_optional_fields_normalized_to_none(gateway, user):
    with gateway.session() as session:
        note = ResearchNoteService(session).create({"user_id": user.id, "title": "T", "content": "C"})
        assert note.country is None
        assert note.topic is None
        assert note.tags is None
        assert note.created_at == note.updated_at


def test_update_and_delete_contract(gateway, user):
    with gateway.session() as session:
        speeches = SpeechService(session)
        speech = speeches.create({"user_id": user.id, "title": "T", "content": "C", "type": "opening"})
        original_updated = speech.updated_at

        updated = speeches.update(speech.id, {"title": "T2", "user_id": 999, "created_at": None})
        assert updated.title == "T2"
        assert updated.user_id == user.id
        assert updated.updated_at >= original_updated
        assert speeches.update(9999, {"title": "x"}) is None

        assert speeches.delete(speech.id) is True
        assert speeches.delete(speech.id) is False
        assert speeches.get(speech.id) is None


def test_messages_survive_a_round_trip_as_typed_objects(gateway, user):
    messages = [Message.new(MessageRole.SYSTEM, "sys"), Message.new(MessageRole.USER, "hi")]
    with gateway.session() as session:
        conversation_id = ConversationService(session).create_conversation(user.id, "hi", messages).id

    with gateway.session() as session:
        stored = ConversationService(session).get(conversation_id)
        assert all(isinstance(m, Message) for m in stored.messages)
        assert [m.id for m in stored.messages] == [m.id for m in messages]
        assert stored.messages[1].role == MessageRole.USER


def test_title_and_preview_helpers():
    assert derive_title("short") == "short"
    assert derive_title("x" * 50) == "x" * 50
    assert derive_title("x" * 51) == "x" * 50 + "..."

    assert conversation_preview([]) == ""
    assert conversation_preview([Message.new(MessageRole.SYSTEM, "s")]) == ""
    two = [Message.new(MessageRole.USER, "u" * 150), Message.new(MessageRole.ASSISTANT, "a")]
    assert conversation_preview(two) == "u" * 100


def test_created_records_carry_utc_timestamps(gateway, user):
    before = datetime.utcnow()
    with gateway.session() as session:
        speech = SpeechService(session).create({"user_id": user.id, "title": "T", "content": "C"})
        stored = SpeechService(session).get(speech.id)
    after = datetime.utcnow()

    assert before <= stored.created_at <= after
    assert stored.updated_at == stored.created_at
    assert before - timedelta(minutes=1) <= user.created_at <= after
