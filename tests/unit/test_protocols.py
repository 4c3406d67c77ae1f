"""
Unit tests for the catalogue of default protocols.
"""

import pytest

from wenet_dummy.exceptions import NotFoundError, ValidationError
from wenet_dummy.protocols import (DEFAULT_PROTOCOLS, load_protocol,
                                   protocol_ids, validate_task_type)


class TestDefaultProtocols:
    def test_protocol_ids(self):
        assert protocol_ids() == list(DEFAULT_PROTOCOLS)
        assert "ECHO_V1" in protocol_ids()
        assert len(protocol_ids()) == 9

    @pytest.mark.parametrize("protocol_id", list(DEFAULT_PROTOCOLS))
    def test_every_protocol_is_a_valid_task_type(self, protocol_id):
        task_type = load_protocol(protocol_id)

        assert task_type["id"] == "wenet_" + protocol_id.lower()
        assert task_type["name"]
        assert isinstance(task_type["norms"], list)

    def test_undefined_protocol(self):
        with pytest.raises(NotFoundError) as exc_info:
            load_protocol("UNDEFINED")
        assert exc_info.value.context["protocol_id"] == "UNDEFINED"

    def test_invalid_resource(self, monkeypatch):
        monkeypatch.setattr(
            "wenet_dummy.protocols.defaults._read_resource", lambda name: "{not json"
        )

        with pytest.raises(ValidationError) as exc_info:
            load_protocol("ECHO_V1")
        assert exc_info.value.code == "protocols.ECHO_V1"


class TestValidateTaskType:
    def test_valid_task_type(self):
        task_type = {"id": "t1", "name": "Task", "transactions": {}, "norms": []}

        assert validate_task_type(task_type) == (True, None, None)

    def test_missing_name(self):
        is_valid, error_message, error_paths = validate_task_type(
            {"id": "t1", "transactions": {}, "norms": []}
        )

        assert not is_valid
        assert "name" in error_message
        assert error_paths == ["root"]

    def test_invalid_norm(self):
        is_valid, _, error_paths = validate_task_type(
            {"id": "t1", "name": "Task", "transactions": {}, "norms": [{"whenever": "true"}]}
        )

        assert not is_valid
        assert error_paths == ["norms.0"]
