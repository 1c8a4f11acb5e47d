import json
from unittest.mock import MagicMock, patch

from core.models.errors import RecordStoreError
from handlers.delete_avatar.handler import handler


class TestDeleteHandler:
    def test_delete_success(
        self, avatar_env, avatar_put_record, avatar_get_record, s3_put_object,
        s3_object_exists, entity_event, lambda_context,
    ) -> None:
        avatar_put_record(7, "PNG")
        s3_put_object("Avatars/7.PNG", b"img", "image/png")

        response = handler(entity_event("7", "DELETE"), lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["entity_id"] == 7
        assert body["message"] == "Avatar deleted successfully"
        assert body["deleted_at"]
        assert avatar_get_record(7)["file_extension"] == ""
        assert not s3_object_exists("Avatars/7.PNG")

    def test_delete_without_avatar(
        self, avatar_env, avatar_put_record, entity_event, lambda_context,
    ) -> None:
        avatar_put_record(7)

        response = handler(entity_event("7", "DELETE"), lambda_context)

        assert response["statusCode"] == 200

    def test_delete_with_missing_file(
        self, avatar_env, avatar_put_record, avatar_get_record, entity_event, lambda_context,
    ) -> None:
        avatar_put_record(7, "GIF")

        response = handler(entity_event("7", "DELETE"), lambda_context)

        assert response["statusCode"] == 200
        assert avatar_get_record(7)["file_extension"] == ""

    def test_unknown_entity(self, avatar_env, entity_event, lambda_context) -> None:
        response = handler(entity_event("404", "DELETE"), lambda_context)

        assert response["statusCode"] == 404

    def test_invalid_entity_id(self, entity_event, lambda_context) -> None:
        response = handler(entity_event("abc", "DELETE"), lambda_context)

        assert response["statusCode"] == 400

    def test_record_store_failure(self, entity_event, lambda_context) -> None:
        store = MagicMock()
        store.delete_avatar.side_effect = RecordStoreError(message="Unable to save avatar record")

        with patch("handlers.delete_avatar.handler.build_avatar_store", return_value=store):
            response = handler(entity_event("7", "DELETE"), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "Unable to save avatar record"
