import pytest
from pydantic import ValidationError

from ezgif import EzgifClient, Operation, OperationSpec, UnknownOperation, list_operations, lookup
from ezgif.registry import OPERATIONS, RENDER_ENDPOINTS, lookup_render_target


@pytest.mark.parametrize("operation", list(Operation))
def test_lookup_known_operations(operation):
    spec = lookup(operation.value)
    assert isinstance(spec, OperationSpec)
    assert spec.id is operation
    assert spec.endpoint_url.startswith("http")
    assert lookup(operation) is spec


@pytest.mark.parametrize("operation_id", ["gif-to-jpeg", "", None, "list", "WEBP-MP4"])
def test_lookup_unknown_operation(operation_id):
    with pytest.raises(UnknownOperation) as exc_info:
        lookup(operation_id)
    assert exc_info.value.operation_id == operation_id


def test_listing_returns_registered_ids():
    assert set(list_operations()) == {operation.value for operation in Operation}
    assert len(list_operations()) == len(OPERATIONS)


def test_listing_mode_of_convert_performs_no_io(call, fake_ezgif):
    fake = fake_ezgif()
    assert call(fake, "convert", "list") == list_operations()
    assert call(fake, "convert", "LIST") == list_operations()
    assert fake.requests == []
    assert EzgifClient.list_operations() == list_operations()


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OPERATIONS[Operation.RESIZE] = None
    with pytest.raises(ValidationError):
        lookup("resize").endpoint_url = "https://example.com"


def test_render_targets():
    assert lookup_render_target("gif").endswith("/maker")
    assert lookup_render_target("webp").endswith("/webp-maker")
    assert {target.value for target in RENDER_ENDPOINTS} == {"gif", "webp", "apng"}
    with pytest.raises(UnknownOperation):
        lookup_render_target("mp4")
